"""Options and ports shared by the discovery pipeline."""
