"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.api.dependencies import get_current_member, get_member_service
from src.database import get_db
from src.models.member import Member
from src.schemas.auth import AuthResponse, MemberLogin, MemberSignup
from src.schemas.member import MemberResponse
from src.services.auth import authenticate_member, create_access_token
from src.services.member_service import MemberService, MemberValidationError

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    signup_data: MemberSignup,
    service: Annotated[MemberService, Depends(get_member_service)],
):
    """Sign up a new member."""
    try:
        member = await service.signup(
            login_name=signup_data.login_name,
            email=signup_data.email,
            password=signup_data.password,
            tos_agreement=signup_data.tos_agreement,
            location=signup_data.location,
            show_email=signup_data.show_email,
            bio=signup_data.bio,
        )
    except MemberValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"errors": e.errors},
        ) from e

    access_token = create_access_token(member.id, member.login_name)

    return AuthResponse(
        access_token=access_token,
        member=MemberResponse.model_validate(member),
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: MemberLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with login name and password."""
    member = authenticate_member(db, credentials.login_name, credentials.password)

    if not member:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect login name or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(member.id, member.login_name)

    return AuthResponse(
        access_token=access_token,
        member=MemberResponse.model_validate(member),
    )


@router.post("/confirm/{token}", response_model=MemberResponse)
async def confirm(
    token: str,
    service: Annotated[MemberService, Depends(get_member_service)],
):
    """Confirm a member account from the emailed token."""
    member = service.confirm(token)
    if not member:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Confirmation token not found"
        )
    return member


@router.get("/me", response_model=MemberResponse)
async def get_me(
    current_member: Annotated[Member, Depends(get_current_member)],
):
    """Get current member information."""
    return current_member
