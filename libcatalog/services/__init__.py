"""Library Catalog - Services Package

This package contains the collaborators injected into the library manager:
- Notification services (email stub, console)
- Catalog observers (patrons)
"""
