"""
Post listing query construction.

Turns the raw query parameters of `GET /api/posts` into a MongoDB filter,
a sort specification and a page window.

Summary
-------
  - Only `keyword`, `tag`, `sort`, `page` and `limit` are accepted.
  - `keyword` is a case-insensitive substring match on title or description.
    When no post matches it, the whole query matches nothing.
  - `tag` is resolved to a tag identifier by exact name. An unknown name
    makes the whole query match nothing.
  - `sort` names the sort field; a leading ``-`` sorts descending.
  - `page` and `limit` fall back to 1 and 10 when absent or unparsable.
    There is no upper bound on `limit`.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from re import escape
from typing import TYPE_CHECKING, Any

from pymongo import ASCENDING, DESCENDING

from app.configs import settings
from app.errors.validation import InvalidParametersError
from app.monitoring import get_logger
from app.utils.helpers import MAX_INT64, positive_int_or

if TYPE_CHECKING:
    from app.repositories.post import PostRepository
    from app.repositories.tag import TagRepository

logger = get_logger(__name__)

ALLOWED_KEYS: tuple[str, ...] = ("keyword", "tag", "sort", "page", "limit")

# No document has a null `_id`.
MATCH_NOTHING: dict[str, Any] = {"_id": None}

type SortSpec = list[tuple[str, int]]


@dataclass(frozen=True)
class PostQuery:
    """
    A validated post listing query.

    Parameters
    ----------
    filter : dict
        MongoDB filter document.
    sort : list[tuple[str, int]]
        Sort keys, `_id` last as a tie-breaker.
    page : int
        1-based page number.
    limit : int
        Page size.
    matches_nothing : bool
        True when a pre-check already proved the result is empty.
    """

    filter: dict[str, Any] = field(default_factory=dict)
    sort: SortSpec = field(default_factory=list)
    page: int = 1
    limit: int = 10
    matches_nothing: bool = False

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


def invalid_keys(params: Mapping[str, Any]) -> list[str]:
    """Return the keys of ``params`` outside the allowed set, in request order."""
    return [key for key in params if key not in ALLOWED_KEYS]


def keyword_predicate(keyword: str) -> dict[str, Any]:
    """Match ``keyword`` as a literal, case-insensitive substring of title or desc."""
    pattern = {"$regex": escape(keyword), "$options": "i"}
    return {"$or": [{"title": pattern}, {"desc": dict(pattern)}]}


def parse_sort(sort: str | None) -> SortSpec:
    """
    Build the sort specification.

    The field name is used verbatim. A leading ``-`` requests descending order.
    `_id` is appended so pages stay stable when sort values tie.
    """
    key = sort or settings.POSTS_DEFAULT_SORT
    direction = ASCENDING
    if key.startswith("-") and len(key) > 1:
        key, direction = key[1:], DESCENDING

    spec: SortSpec = [(key, direction)]
    if key != "_id":
        spec.append(("_id", ASCENDING))
    return spec


def parse_window(page: str | None, limit: str | None) -> tuple[int, int]:
    """
    Parse `page` and `limit`, falling back to the defaults instead of failing.

    A page whose offset would not fit in a BSON integer falls back to the
    default page.
    """
    parsed_page = positive_int_or(page, settings.POSTS_DEFAULT_PAGE)
    parsed_limit = positive_int_or(limit, settings.POSTS_DEFAULT_LIMIT)
    if (parsed_page - 1) * parsed_limit > MAX_INT64:
        parsed_page = settings.POSTS_DEFAULT_PAGE
    return parsed_page, parsed_limit


async def build_post_query(
    params: Mapping[str, str],
    posts: "PostRepository",
    tags: "TagRepository",
) -> PostQuery:
    """
    Build a `PostQuery` from raw query parameters.

    Args:
        params: Query parameters as received.
        posts: Used for the keyword pre-check.
        tags: Used to resolve the tag name.

    Returns:
        PostQuery: The filter, sort and page window.

    Raises:
        InvalidParametersError: If any key is not one of the allowed keys.
    """
    if bad_keys := invalid_keys(params):
        raise InvalidParametersError(bad_keys)

    page, limit = parse_window(params.get("page"), params.get("limit"))
    sort = parse_sort(params.get("sort"))

    def empty() -> PostQuery:
        return PostQuery(MATCH_NOTHING, sort, page, limit, matches_nothing=True)

    query: dict[str, Any] = {}

    if keyword := params.get("keyword"):
        predicate = keyword_predicate(keyword)
        if not await posts.exists(predicate):
            logger.info("No posts match keyword", keyword=keyword)
            return empty()
        query.update(predicate)

    if tag_name := params.get("tag"):
        tag = await tags.get_by_name(tag_name)
        if tag is None:
            logger.info("Tag filter names an unknown tag", tag=tag_name)
            return empty()
        query["tags"] = tag.id

    return PostQuery(query, sort, page, limit)
