"""Pydantic schemas for the REST API."""

from booths.web.schemas.requests import QuoteRequest, SlotsRequest
from booths.web.schemas.responses import (
    BomResponseSchema,
    ErrorResponseSchema,
    LaborSchema,
    PriceBreakdownSchema,
    QuoteResponseSchema,
    SlotSchema,
    SlotsResponseSchema,
    WallRunSchema,
)

__all__ = [
    # Requests
    "QuoteRequest",
    "SlotsRequest",
    # Responses
    "BomResponseSchema",
    "ErrorResponseSchema",
    "LaborSchema",
    "PriceBreakdownSchema",
    "QuoteResponseSchema",
    "SlotSchema",
    "SlotsResponseSchema",
    "WallRunSchema",
]
