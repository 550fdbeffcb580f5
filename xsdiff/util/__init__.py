"""
Utility functions and helpers.

Modules:
- files: directory creation, atomic writes, line reading
- progress: rich status spinner and summary panels
"""
