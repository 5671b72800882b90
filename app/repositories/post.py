"""Post repository for document store operations."""

from bson import ObjectId
from pymongo.asynchronous.database import AsyncDatabase

from app.configs import POSTS_COLLECTION
from app.models import PostDB, PostWithTags
from app.repositories.base import BaseRepository, Query, store_errors
from app.repositories.tag import TagRepository
from app.schemas.post import PostUpdate
from app.services.post_query import PostQuery


class PostRepository(BaseRepository[PostDB]):
    """
    Repository for the `posts` collection.

    Posts store tag identifiers. Reads expand them into tag documents with
    a second query against `tags` (see `expand`).
    """

    model = PostDB
    collection_name = POSTS_COLLECTION
    timestamps = True

    def __init__(self, db: AsyncDatabase, tags: TagRepository | None = None) -> None:
        super().__init__(db)
        self.tags = tags or TagRepository(db)

    async def create(
        self,
        title: str,
        desc: str,
        image: str,
        tag_names: list[str],
    ) -> PostDB:
        """
        Create a post, resolving tag names to identifiers.

        Names with no matching tag are dropped without error.

        Args:
            title: Post title
            desc: Post description
            image: Encoded image payload (data URI)
            tag_names: Names of the tags to attach

        Returns:
            PostDB: The stored post
        """
        tags = await self.tags.find_by_names(tag_names)
        with store_errors("creating post"):
            return await self.insert(
                PostDB(title=title, desc=desc, image=image, tags=[tag.id for tag in tags]),
            )

    async def get_post(self, post_id: str) -> PostWithTags | None:
        """Get a post with its tags expanded."""
        with store_errors("fetching post"):
            post = await self.get_by_id(post_id)
            if post is None:
                return None
            return (await self.expand([post]))[0]

    async def exists(self, query: Query) -> bool:
        """Return True if at least one post matches ``query``."""
        with store_errors("fetching posts"):
            return await self.collection.find_one(query, projection={"_id": 1}) is not None

    async def list_posts(self, query: PostQuery) -> list[PostWithTags]:
        """
        Get one page of posts matching a built query, tags expanded.

        Args:
            query: Output of `build_post_query`

        Returns:
            list[PostWithTags]: At most `query.limit` posts
        """
        if query.matches_nothing:
            return []

        with store_errors("fetching posts"):
            cursor = (
                self.collection.find(query.filter)
                .sort(query.sort)
                .skip(query.skip)
                .limit(query.limit)
            )
            posts = [self._to_model(document) for document in await cursor.to_list()]
            return await self.expand(posts)

    async def expand(self, posts: list[PostDB]) -> list[PostWithTags]:
        """
        Replace tag identifiers with tag documents.

        Identifiers whose tag no longer exists are skipped. Each post keeps
        the order of its own identifiers.
        """
        wanted: list[ObjectId] = list(dict.fromkeys(tag_id for post in posts for tag_id in post.tags))
        found = {tag.id: tag for tag in await self.tags.get_by_ids(wanted)}

        expanded = []
        for post in posts:
            data = post.model_dump()
            data["tags"] = [found[tag_id] for tag_id in post.tags if tag_id in found]
            expanded.append(PostWithTags.model_validate(data))
        return expanded

    async def update_post(self, post_id: str, update: PostUpdate) -> PostDB | None:
        """
        Replace the supplied fields of a post.

        Tags are stored as given (identifiers); names are not resolved.
        """
        with store_errors("updating post"):
            return await self.update_fields(post_id, update.to_update())

    async def delete_post(self, post_id: str) -> PostDB | None:
        with store_errors("deleting post"):
            return await self.delete(post_id)
