from app.services.media import MediaService, UploadedImage
from app.services.post_query import PostQuery, build_post_query

__all__ = ["MediaService", "PostQuery", "UploadedImage", "build_post_query"]
