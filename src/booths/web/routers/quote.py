"""Quote endpoints."""

from fastapi import APIRouter

from booths.application.config import load_config_from_dict
from booths.web.dependencies import JsonExporterDep, QuoteCommandDep
from booths.web.schemas.requests import QuoteRequest
from booths.web.schemas.responses import QuoteResponseSchema

router = APIRouter(prefix="/quote", tags=["quote"])


@router.post("", response_model=QuoteResponseSchema)
async def generate_quote(
    request: QuoteRequest,
    command: QuoteCommandDep,
    exporter: JsonExporterDep,
) -> QuoteResponseSchema:
    """Build the layout from a configuration and price it.

    Components that could not be placed are left out of the quote and
    listed in ``warnings``; the request itself still succeeds.

    Args:
        request: Request containing the booth configuration.
        command: Injected quote command.
        exporter: Injected JSON exporter.

    Returns:
        Packing list, price breakdown, wall runs and placed components.
    """
    config = load_config_from_dict(request.config)
    result = command.execute_config(config)
    data = exporter.to_dict(result)
    return QuoteResponseSchema(
        bom=data["bom"],
        price=data["price"],
        walls=data["walls"],
        components=data["components"],
        rendered_fixtures=data["rendered_fixtures"],
        warnings=data["warnings"],
    )
