"""Blog Content API."""
