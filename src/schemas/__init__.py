"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import AuthResponse, MemberLogin, MemberSignup
from src.schemas.garden import GardenResponse
from src.schemas.member import (
    MemberDetailResponse,
    MemberProfileUpdate,
    MemberResponse,
    RoleAssign,
    RoleResponse,
)

__all__ = [
    "MemberSignup",
    "MemberLogin",
    "AuthResponse",
    "MemberResponse",
    "MemberDetailResponse",
    "MemberProfileUpdate",
    "RoleAssign",
    "RoleResponse",
    "GardenResponse",
]
