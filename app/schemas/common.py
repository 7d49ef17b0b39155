"""
Shared API schemas.

Every JSON body uses camelCase keys; successful responses are wrapped in
``{code, message, payload}`` and errors in ``{code, message}``.
"""

import datetime
from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

PayloadT = TypeVar("PayloadT")


class CamelModel(BaseModel):
    """Base schema: snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class SuccessCode(str, Enum):
    CREATED = "CREATED"
    UPDATE = "UPDATE"
    FETCH = "FETCH"


class SuccessResponse(CamelModel, Generic[PayloadT]):
    """Envelope for successful responses."""
    code: SuccessCode
    message: str
    payload: Optional[PayloadT] = None


class ErrorResponse(CamelModel):
    """Envelope for error responses."""
    code: str
    message: str


def as_utc(value: Optional[datetime.datetime]) -> Optional[datetime.datetime]:
    """Normalise to an aware UTC datetime; naive values are taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)
