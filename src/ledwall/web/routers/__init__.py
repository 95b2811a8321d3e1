"""API routers for the REST API."""

from ledwall.web.routers.catalog import router as catalog_router
from ledwall.web.routers.export import router as export_router
from ledwall.web.routers.layout import router as layout_router
from ledwall.web.routers.validate import router as validate_router

__all__ = [
    "catalog_router",
    "export_router",
    "layout_router",
    "validate_router",
]
