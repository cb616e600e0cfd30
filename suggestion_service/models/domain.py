# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures, NO FastAPI dependency.

Field names are snake_case in Python and camelCase on the wire.
"""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Basic shape only: local@domain.tld, no whitespace, one "@".
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s.]+(\.[^@\s.]+)+$")


class GeoLocation(BaseModel):
    """A city or region a suggested name is associated with."""

    model_config = ConfigDict(populate_by_name=True)

    city_or_region_name: str = Field(
        ..., alias="cityOrRegionName", max_length=255, examples=["ABEOKUTA"]
    )
    code: str = Field(..., max_length=50, examples=["NWY"])


class SuggestedName(BaseModel):
    """A name proposed for the dictionary, awaiting review."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., max_length=255, examples=["lagbaja"])
    description: str = Field(default="", max_length=5000)
    locations: list[GeoLocation] = Field(default_factory=list)
    email: str = Field(..., max_length=255, examples=["test@email.com"])

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be empty")
        return v

    @field_validator("email")
    @classmethod
    def email_shape(cls, v: str) -> str:
        v = v.strip()
        if not is_valid_email(v):
            raise ValueError("email must be a valid email address")
        return v


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value))
