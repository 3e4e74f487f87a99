"""Library Catalog - Core Application Package

This package contains the core application modules including:
- Catalog and loan management (library.py)
- Data models and the book builder (book.py, loan.py)
- Identifier validation (validators.py)
- CLI output helpers (ui_helpers.py)
- Notification and observer services (services/)
"""
