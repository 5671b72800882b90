"""Shared building blocks for documents stored in MongoDB."""

from typing import Annotated, Any

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, PlainValidator, WithJsonSchema


def to_object_id(value: Any) -> ObjectId:
    """
    Coerce a value into an `ObjectId`.

    Args:
        value: An `ObjectId` or its 24-character hex string form.

    Returns:
        ObjectId: The parsed identifier.

    Raises:
        ValueError: If the value is not a valid identifier.
    """
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        mssg = f"'{value}' is not a valid identifier"
        raise ValueError(mssg) from e


def parse_object_id(value: Any) -> ObjectId | None:
    """Return the `ObjectId` for ``value`` or ``None`` when it is malformed."""
    try:
        return to_object_id(value)
    except ValueError:
        return None


PyObjectId = Annotated[
    ObjectId,
    PlainValidator(to_object_id),
    PlainSerializer(str, return_type=str, when_used="json"),
    WithJsonSchema({"type": "string", "examples": ["66f0c0ffee0000000000abcd"]}),
]


class DocumentModel(BaseModel):
    """Base model for a stored document keyed by `_id`."""

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    id: PyObjectId = Field(default_factory=ObjectId, alias="_id")

    def to_document(self) -> dict[str, Any]:
        """Return the BSON-ready mapping, keyed by field aliases."""
        return self.model_dump(by_alias=True)
