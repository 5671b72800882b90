"""
Post request and response schemas.

`PostResponse` carries tag identifiers, as stored. `PostDetailResponse`
carries the expanded tag objects and is used for reads.
"""

from datetime import datetime
from typing import Annotated

from orjson import JSONDecodeError, loads
from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from app.errors.validation import InvalidTagsError
from app.models import PostDB, PostWithTags, PyObjectId
from app.schemas.tag import TagResponse

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]


class PostUpdate(BaseModel):
    """
    Partial post update.

    Only the supplied fields are replaced. `tags` is taken as a list of
    tag identifiers; names are not resolved here.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: NonEmptyStr | None = Field(default=None, examples=["Updated title"])
    desc: NonEmptyStr | None = Field(default=None, examples=["Updated description"])
    image: NonEmptyStr | None = Field(
        default=None,
        description="Data URI of the image (`data:<mime>;base64,<body>`)",
    )
    tags: list[PyObjectId] | None = Field(
        default=None,
        description="Tag identifiers",
        examples=[["66f0c0ffee0000000000abcd"]],
    )

    def to_update(self) -> dict:
        """Return only the fields that were supplied with a value."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class PostBaseResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: PyObjectId = Field(..., description="Post ID")
    title: str
    desc: str
    image: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class PostResponse(PostBaseResponse):
    """Post as stored, with tag identifiers."""

    tags: list[PyObjectId] = Field(default_factory=list)

    @classmethod
    def from_db(cls, post: PostDB) -> "PostResponse":
        return cls.model_validate(post.model_dump())


class PostDetailResponse(PostBaseResponse):
    """Post with its tags expanded."""

    tags: list[TagResponse] = Field(default_factory=list)

    @classmethod
    def from_db(cls, post: PostWithTags) -> "PostDetailResponse":
        return cls.model_validate(post.model_dump())


def parse_tag_names(raw: list[str] | None) -> list[str]:
    """
    Normalize the `tags` form field into a list of names.

    Each value is either a plain tag name (the field may repeat) or a
    JSON-encoded array of names.

    Raises:
        InvalidTagsError: If a JSON value is malformed or not an array of strings.
    """
    names: list[str] = []
    for value in raw or []:
        stripped = value.strip()
        if not stripped.startswith("["):
            if stripped:
                names.append(stripped)
            continue
        try:
            decoded = loads(stripped)
        except JSONDecodeError as e:
            raise InvalidTagsError(str(e)) from e
        if not isinstance(decoded, list) or not all(isinstance(name, str) for name in decoded):
            raise InvalidTagsError("expected an array of strings")
        names.extend(decoded)
    return names
