"""Tests for request and response schemas."""

import pytest
from bson import ObjectId
from pydantic import ValidationError

from app.errors import InvalidTagsError
from app.models import PostDB
from app.schemas import PostResponse, PostUpdate, TagConditionRequest, TagFilter
from app.schemas.post import parse_tag_names


class TestParseTagNames:
    def test_none_is_empty(self) -> None:
        assert parse_tag_names(None) == []

    def test_repeated_values(self) -> None:
        assert parse_tag_names(["Technology", " Science ", ""]) == ["Technology", "Science"]

    def test_json_encoded_array(self) -> None:
        assert parse_tag_names(['["Technology", "Science"]']) == ["Technology", "Science"]

    @pytest.mark.parametrize("value", ["[Technology", '["a", 1]', "[{}]"])
    def test_malformed_json(self, value: str) -> None:
        with pytest.raises(InvalidTagsError):
            parse_tag_names([value])


class TestTagFilter:
    def test_empty(self) -> None:
        assert TagFilter().to_query() == {}

    def test_single_name(self) -> None:
        assert TagFilter(name="Art").to_query() == {"name": "Art"}

    def test_names(self) -> None:
        assert TagFilter(name=["Art", "Music"]).to_query() == {"name": {"$in": ["Art", "Music"]}}

    def test_unknown_field(self) -> None:
        with pytest.raises(ValidationError):
            TagConditionRequest.model_validate({"condition": {"color": "red"}})


class TestPostUpdate:
    def test_only_supplied_fields(self) -> None:
        tag_id = ObjectId()
        update = PostUpdate.model_validate({"desc": "New", "tags": [str(tag_id)], "title": None})
        assert update.to_update() == {"desc": "New", "tags": [tag_id]}

    def test_empty_title_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PostUpdate(title="")

    def test_invalid_tag_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PostUpdate.model_validate({"tags": ["Technology"]})


def test_post_response_uses_wire_names() -> None:
    post = PostDB(title="t", desc="d", image="data:image/png;base64,AA==", tags=[ObjectId()])

    body = PostResponse.from_db(post).model_dump(mode="json", by_alias=True)

    assert body["id"] == str(post.id)
    assert body["tags"] == [str(post.tags[0])]
    assert {"createdAt", "updatedAt"} <= set(body)
    assert "_id" not in body
