"""SQLAlchemy models."""

from src.models.forum import Comment, Forum, Post
from src.models.garden import Garden, Planting
from src.models.member import Member
from src.models.role import MemberRole, Role

__all__ = [
    "Member",
    "Role",
    "MemberRole",
    "Garden",
    "Planting",
    "Forum",
    "Post",
    "Comment",
]
