"""Legal slot endpoints."""

from fastapi import APIRouter

from booths.application.config import load_config_from_dict
from booths.infrastructure import slot_to_dict
from booths.web.dependencies import SlotsCommandDep
from booths.web.schemas.requests import SlotsRequest
from booths.web.schemas.responses import SlotSchema, SlotsResponseSchema

router = APIRouter(prefix="/slots", tags=["slots"])


@router.post("", response_model=SlotsResponseSchema)
async def list_slots(
    request: SlotsRequest,
    command: SlotsCommandDep,
) -> SlotsResponseSchema:
    """List where one more component of a kind could go.

    Floor components get floor coordinates; TVs and shelves get wall
    slots with a height tier. An unknown catalog index is a 400.
    """
    config = load_config_from_dict(request.config)
    result = command.execute(
        config,
        request.kind,
        catalog_index=request.catalog_index,
        rotation=request.rotation,
        wall_shape=request.wall_shape,
    )
    return SlotsResponseSchema(
        kind=result.kind,
        catalog_index=result.catalog_index,
        slots=[SlotSchema(**slot_to_dict(s)) for s in result.slots],
        warnings=result.warnings,
    )
