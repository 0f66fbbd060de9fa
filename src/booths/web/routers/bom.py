"""Packing list endpoints."""

from fastapi import APIRouter

from booths.application.config import load_config_from_dict
from booths.infrastructure import categorize_bom
from booths.web.dependencies import QuoteCommandDep
from booths.web.schemas.requests import QuoteRequest
from booths.web.schemas.responses import BomResponseSchema

router = APIRouter(prefix="/bom", tags=["bom"])


@router.post("", response_model=BomResponseSchema)
async def generate_bom(
    request: QuoteRequest,
    command: QuoteCommandDep,
) -> BomResponseSchema:
    """Aggregate the packing list for a booth configuration."""
    config = load_config_from_dict(request.config)
    result = command.execute_config(config)
    return BomResponseSchema(
        bom=result.bom.to_dict(),
        categories=categorize_bom(result.bom.to_dict()),
        warnings=result.warnings,
    )
