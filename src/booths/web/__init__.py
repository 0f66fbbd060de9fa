"""FastAPI REST API for booth packing lists and quotes.

This module provides a REST API for quoting booth configurations,
aggregating packing lists, listing legal component slots and browsing
the catalog.

Usage:
    uvicorn booths.web:app --reload
"""

from booths.web.app import app, create_app

__all__ = ["app", "create_app"]
