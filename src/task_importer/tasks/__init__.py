"""
Task discovery subsystem.

Components:
- task_models.py: data structures (FileEntry, TaskList, TaskCallable)
- task_scanner.py: directory listing + eligibility check
- task_loader.py: imports a task file and decides list vs callable
- task_adapter.py: binds runner handle/params, derives task names
- task_registrar.py: hands the result to the runner
"""
