"""Shared model plumbing for the storefront API"""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

# Held as Decimal, written to JSON as a number
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

ZERO = Decimal("0")


class APIModel(BaseModel):
    """Base model: snake_case in Python, camelCase on the wire"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(APIModel):
    """Plain message response"""
    message: str
