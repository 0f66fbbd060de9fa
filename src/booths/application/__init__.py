"""Application layer - use cases and DTOs."""

from .commands import GenerateQuoteCommand, ListSlotsCommand
from .dtos import QuoteOutput, SlotsOutput

__all__ = [
    "GenerateQuoteCommand",
    "ListSlotsCommand",
    "QuoteOutput",
    "SlotsOutput",
]
