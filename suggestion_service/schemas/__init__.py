# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Pydantic request/response schemas."""
from typing import Optional

from pydantic import BaseModel

from suggestion_service.models.domain import GeoLocation, SuggestedName

__all__ = ["GeoLocation", "SuggestedName", "SuggestionMeta", "ErrorResponse"]


class SuggestionMeta(BaseModel):
    # Rendered as a string on the wire, e.g. {"count": "2"}.
    count: str


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
    request_id: Optional[str] = None
