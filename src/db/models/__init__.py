from db.models.hash_tag import HashTag
from db.models.post import Post

__all__ = ["HashTag", "Post"]
