# Importing both models registers them on Base.metadata
from inner_peace.models.post import Post
from inner_peace.models.suggestion import Suggestion

__all__ = ["Post", "Suggestion"]
