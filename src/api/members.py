"""Member API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from src.api.dependencies import get_current_member, get_member_service, require_role
from src.database import get_db
from src.models.enums import RoleName
from src.models.member import Member
from src.schemas.garden import GardenResponse
from src.schemas.member import (
    MemberDetailResponse,
    MemberProfileUpdate,
    MemberResponse,
    RoleAssign,
    RoleResponse,
)
from src.services.member_service import MemberService, MemberValidationError

router = APIRouter(prefix="/api/v1/members", tags=["members"])


def get_member_or_404(service: MemberService, login_name: str) -> Member:
    """Look up a member by login name (any case) or raise 404."""
    member = service.get_by_login_name(login_name)
    if not member:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Member not found")
    return member


@router.get("", response_model=list[MemberResponse])
def list_members(
    db: Annotated[Session, Depends(get_db)],
):
    """List confirmed members alphabetically."""
    return Member.confirmed(db).all()


@router.get("/interesting", response_model=list[MemberResponse])
def list_interesting_members(
    db: Annotated[Session, Depends(get_db)],
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
):
    """List confirmed members, most recently active first."""
    return Member.interesting(db).limit(limit).all()


@router.put("/me", response_model=MemberResponse)
async def update_my_profile(
    profile_data: MemberProfileUpdate,
    current_member: Annotated[Member, Depends(get_current_member)],
    service: Annotated[MemberService, Depends(get_member_service)],
):
    """Update the current member's profile."""
    try:
        return await service.update_profile(
            current_member, profile_data.model_dump(exclude_unset=True)
        )
    except MemberValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"errors": e.errors},
        ) from e


@router.get("/{login_name}", response_model=MemberDetailResponse)
def get_member(
    login_name: str,
    service: Annotated[MemberService, Depends(get_member_service)],
):
    """Get a member's public profile."""
    member = get_member_or_404(service, login_name)

    detail = MemberDetailResponse.model_validate(member)
    if member.show_email:
        detail.public_email = member.email
    detail.role_names = [role.name for role in member.roles]
    for key, value in service.member_summary(member).items():
        setattr(detail, key, value)
    return detail


@router.get("/{login_name}/gardens", response_model=list[GardenResponse])
def get_member_gardens(
    login_name: str,
    service: Annotated[MemberService, Depends(get_member_service)],
):
    """List a member's gardens."""
    member = get_member_or_404(service, login_name)

    result = []
    for garden in member.gardens:
        garden_response = GardenResponse.model_validate(garden)
        garden_response.planting_count = len(garden.plantings)
        result.append(garden_response)
    return result


@router.post(
    "/{login_name}/roles", response_model=RoleResponse, status_code=status.HTTP_201_CREATED
)
def assign_member_role(
    login_name: str,
    role_data: RoleAssign,
    admin: Annotated[Member, Depends(require_role(RoleName.ADMIN.value))],
    service: Annotated[MemberService, Depends(get_member_service)],
):
    """Give a member a role (admins only)."""
    member = get_member_or_404(service, login_name)
    return service.assign_role(member, role_data.name)
