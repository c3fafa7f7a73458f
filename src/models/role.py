"""Role and member-role join models."""

from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


def normalize_role_name(name: str) -> str:
    """Turn a stored role name into the form used for role checks."""
    return name.replace(" ", "_")


class Role(Base, TimestampMixin):
    """Named role granting extra permissions (admin, moderator, ...)."""

    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False)
    description = Column(String, nullable=True)

    # Relationships
    assignments = relationship("MemberRole", back_populates="role", cascade="all, delete-orphan")

    def __str__(self) -> str:
        return self.name


class MemberRole(Base, TimestampMixin):
    """Assignment of a role to a member."""

    __tablename__ = "member_roles"
    __table_args__ = (UniqueConstraint("member_id", "role_id", name="uq_member_roles_member_role"),)

    id = Column(Integer, primary_key=True, index=True)
    member_id = Column(Integer, ForeignKey("members.id"), nullable=False, index=True)
    role_id = Column(Integer, ForeignKey("roles.id"), nullable=False, index=True)

    # Relationships
    member = relationship("Member", back_populates="role_assignments")
    role = relationship("Role", back_populates="assignments")
