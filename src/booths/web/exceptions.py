"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from booths.application.config import ConfigError
from booths.domain import DegenerateFloorError, UnknownCatalogIndexError


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid booth configuration",
                "error_type": exc.error_type,
                "details": [
                    {"path": d.get("path"), "message": d.get("message")}
                    for d in exc.details
                ],
            },
        )

    @app.exception_handler(UnknownCatalogIndexError)
    async def unknown_catalog_index_handler(
        request: Request, exc: UnknownCatalogIndexError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": str(exc),
                "error_type": "unknown_catalog_index",
                "details": {"table": exc.table, "size": exc.size},
            },
        )

    @app.exception_handler(DegenerateFloorError)
    async def degenerate_floor_handler(
        request: Request, exc: DegenerateFloorError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "degenerate_floor",
                "details": None,
            },
        )
