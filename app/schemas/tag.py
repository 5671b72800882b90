"""Tag request and response schemas."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from app.models import PyObjectId, TagDB

TagName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


class TagCreate(BaseModel):
    """Tag creation payload."""

    name: TagName = Field(..., description="Tag name", examples=["Technology"])


class TagUpdate(BaseModel):
    """Tag update payload."""

    name: TagName = Field(..., description="New tag name", examples=["Science"])


class TagFilter(BaseModel):
    """
    Filter accepted by the tag condition lookup.

    A single name matches exactly, a list matches any of the names.
    An empty filter matches every tag.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | list[str] | None = None

    def to_query(self) -> dict:
        if self.name is None:
            return {}
        if isinstance(self.name, list):
            return {"name": {"$in": self.name}}
        return {"name": self.name}


class TagConditionRequest(BaseModel):
    """Body of `POST /api/tags/condition`."""

    condition: TagFilter = Field(default_factory=TagFilter)


class TagResponse(BaseModel):
    """Tag as returned by the API."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: PyObjectId = Field(..., description="Tag ID")
    name: str

    @classmethod
    def from_db(cls, tag: TagDB) -> "TagResponse":
        return cls.model_validate(tag.model_dump())
