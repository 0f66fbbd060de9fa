"""FastAPI dependency injection for booth services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from booths.application.commands import GenerateQuoteCommand, ListSlotsCommand
from booths.infrastructure import JsonExporter


@lru_cache(maxsize=1)
def get_quote_command() -> GenerateQuoteCommand:
    """Get the cached GenerateQuoteCommand; its services are stateless."""
    return GenerateQuoteCommand()


@lru_cache(maxsize=1)
def get_slots_command() -> ListSlotsCommand:
    return ListSlotsCommand()


def get_json_exporter() -> JsonExporter:
    return JsonExporter()


# Type aliases for cleaner endpoint signatures
QuoteCommandDep = Annotated[GenerateQuoteCommand, Depends(get_quote_command)]
SlotsCommandDep = Annotated[ListSlotsCommand, Depends(get_slots_command)]
JsonExporterDep = Annotated[JsonExporter, Depends(get_json_exporter)]
