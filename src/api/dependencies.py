"""FastAPI dependencies for authentication and database."""

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.database import get_db
from src.models.member import Member
from src.services.auth import decode_access_token
from src.services.geocoding import GeocodingService
from src.services.member_service import MemberService

security = HTTPBearer()


def get_current_member(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> Member:
    """Get the current authenticated member from JWT token."""
    token = credentials.credentials
    payload = decode_access_token(token)

    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    member_id = payload.get("sub")
    if member_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    member = db.query(Member).filter(Member.id == int(member_id)).first()
    if member is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Member not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return member


def require_role(role_name: str) -> Callable[..., Member]:
    """Build a dependency that only lets members holding a role through."""

    def role_checker(
        current_member: Annotated[Member, Depends(get_current_member)],
    ) -> Member:
        if not current_member.has_role(role_name):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Access denied. Required role: {role_name}",
            )
        return current_member

    return role_checker


def get_geocoding_service() -> GeocodingService:
    """Get geocoding service instance."""
    return GeocodingService()


def get_member_service(
    db: Annotated[Session, Depends(get_db)],
    geocoder: Annotated[GeocodingService, Depends(get_geocoding_service)],
) -> MemberService:
    """Get member service with dependencies."""
    return MemberService(db, geocoder)
