"""API routers for the booth REST API."""

from booths.web.routers.bom import router as bom_router
from booths.web.routers.catalog import router as catalog_router
from booths.web.routers.quote import router as quote_router
from booths.web.routers.slots import router as slots_router

__all__ = [
    "bom_router",
    "catalog_router",
    "quote_router",
    "slots_router",
]
