"""FastAPI REST API for LED wall layouts.

This module provides a REST API for computing screen layouts, listing the
case and panel catalogs, validating configurations, and exporting layouts.

Usage:
    uvicorn ledwall.web:app --reload
"""

from ledwall.web.app import app, create_app

__all__ = ["app", "create_app"]
