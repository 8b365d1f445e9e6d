"""
Shared pydantic types for API responses.
"""

from typing import Annotated, Any

from bson import ObjectId
from pydantic import BaseModel, BeforeValidator


def _stringify_object_id(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    return value


# ObjectId rendered as its 24-char hex string
ObjectIdStr = Annotated[str, BeforeValidator(_stringify_object_id)]


class MessageResponse(BaseModel):
    """Plain outcome message."""

    message: str


class InsertResponse(BaseModel):
    """Store acknowledgement of a single insert."""

    acknowledged: bool = True
    insertedId: ObjectIdStr
