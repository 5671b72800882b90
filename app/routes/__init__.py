from app.routes.post import router as post_router
from app.routes.tag import router as tag_router

__all__ = ["post_router", "tag_router"]
