"""Forum, post and comment models."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class Forum(Base, TimestampMixin):
    """Discussion forum owned by a member."""

    __tablename__ = "forums"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("members.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    # Relationships
    owner = relationship("Member", back_populates="forums")
    posts = relationship("Post", back_populates="forum")


class Post(Base, TimestampMixin):
    """Post written by a member, optionally inside a forum."""

    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    author_id = Column(Integer, ForeignKey("members.id"), nullable=False, index=True)
    forum_id = Column(Integer, ForeignKey("forums.id"), nullable=True, index=True)
    subject = Column(String(255), nullable=False)
    body = Column(Text, nullable=False)

    # Relationships
    author = relationship("Member", back_populates="posts")
    forum = relationship("Forum", back_populates="posts")
    comments = relationship("Comment", back_populates="post", cascade="all, delete-orphan")


class Comment(Base, TimestampMixin):
    """Comment on a post."""

    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(Integer, ForeignKey("posts.id"), nullable=False, index=True)
    author_id = Column(Integer, ForeignKey("members.id"), nullable=False, index=True)
    body = Column(Text, nullable=False)

    # Relationships
    post = relationship("Post", back_populates="comments")
    author = relationship("Member", back_populates="comments")
