"""Member service for signup, profile updates and role assignment."""

import logging
import secrets
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.models.garden import DEFAULT_GARDEN_NAME, Garden
from src.models.member import Member
from src.models.role import MemberRole, Role
from src.services.auth import get_password_hash
from src.services.geocoding import GeocodingError, GeocodingService
from src.services.validation import (
    BLANK_MESSAGE,
    TAKEN_MESSAGE,
    is_blank,
    validate_login_name,
    validate_tos_agreement,
)

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("email", "location", "show_email", "bio")
VALIDATED_FIELDS = ("login_name", "email", "show_email", "tos_agreement")


class MemberValidationError(Exception):
    """Raised when a member cannot be saved.

    ``errors`` maps field names to the messages for that field.
    """

    def __init__(self, errors: dict[str, list[str]]):
        self.errors = errors
        summary = "; ".join(f"{field} {', '.join(msgs)}" for field, msgs in errors.items())
        super().__init__(f"Member is invalid: {summary}")


class MemberService:
    """Service for member-related operations."""

    def __init__(self, db: Session, geocoder: GeocodingService | None = None):
        self.db = db
        self.geocoder = geocoder or GeocodingService()

    def get_by_login_name(self, login_name: str) -> Member | None:
        """Find a member by login name, ignoring case."""
        return (
            self.db.query(Member)
            .filter(func.lower(Member.login_name) == login_name.lower())
            .first()
        )

    def login_name_taken(self, login_name: str, exclude_id: int | None = None) -> bool:
        """Check whether another member already uses this login name (any case)."""
        query = self.db.query(Member.id).filter(
            func.lower(Member.login_name) == login_name.lower()
        )
        if exclude_id is not None:
            query = query.filter(Member.id != exclude_id)
        return query.first() is not None

    def email_taken(self, email: str, exclude_id: int | None = None) -> bool:
        query = self.db.query(Member.id).filter(func.lower(Member.email) == email.lower())
        if exclude_id is not None:
            query = query.filter(Member.id != exclude_id)
        return query.first() is not None

    def validate(self, member: Member) -> dict[str, list[str]]:
        """Collect validation errors for a new or changed member.

        Returns:
            Mapping of field name to error messages; empty if the member is valid
        """
        errors: dict[str, list[str]] = {}

        login_errors = validate_login_name(
            member.login_name,
            lambda name: self.login_name_taken(name, exclude_id=member.id),
        )
        if login_errors:
            errors["login_name"] = login_errors

        if is_blank(member.email):
            errors["email"] = [BLANK_MESSAGE]
        elif self.email_taken(member.email, exclude_id=member.id):
            errors["email"] = [TAKEN_MESSAGE]

        # Column default only fills this in for new members
        if member.id is not None and member.show_email is None:
            errors["show_email"] = [BLANK_MESSAGE]

        # Terms of service only gate creation
        if member.id is None:
            tos_errors = validate_tos_agreement(member.tos_agreement)
            if tos_errors:
                errors["tos_agreement"] = tos_errors

        return errors

    async def apply_geocoding(self, member: Member) -> None:
        """Resolve the member's location into coordinates.

        Runs after validation on every save. A blank location, no match or a
        provider failure clears both coordinates.
        """
        if is_blank(member.location):
            member.latitude = None
            member.longitude = None
            return

        try:
            coordinates = await self.geocoder.geocode(member.location.strip())
        except GeocodingError as e:
            logger.warning(f"Could not geocode location for {member.login_name}: {e}")
            coordinates = None

        if coordinates is None:
            member.latitude = None
            member.longitude = None
        else:
            member.latitude = coordinates.latitude
            member.longitude = coordinates.longitude

    async def signup(
        self,
        login_name: str,
        email: str,
        password: str,
        tos_agreement: bool,
        location: str | None = None,
        show_email: bool = False,
        bio: str | None = None,
        confirmed: bool = False,
    ) -> Member:
        """Create a new member with a default garden.

        Raises:
            MemberValidationError: If any field is invalid. Nothing is
                persisted and no geocoding happens in that case.
        """
        member = Member(
            login_name=login_name,
            email=email,
            encrypted_password=get_password_hash(password),
            tos_agreement=tos_agreement,
            location=location,
            show_email=show_email,
            bio=bio,
        )
        if confirmed:
            member.confirmed_at = datetime.now(UTC)
        else:
            member.confirmation_token = secrets.token_urlsafe(32)

        errors = self.validate(member)
        if errors:
            raise MemberValidationError(errors)

        await self.apply_geocoding(member)
        member.gardens.append(Garden(name=DEFAULT_GARDEN_NAME))

        self.db.add(member)
        self._commit(member)
        self.db.refresh(member)

        logger.info(f"Created member {member.login_name} (id={member.id})")
        return member

    async def update_profile(self, member: Member, changes: dict[str, Any]) -> Member:
        """Apply profile changes and re-geocode the location.

        Args:
            member: Persistent member to update
            changes: Field values to set; keys outside the profile fields are ignored

        Raises:
            MemberValidationError: If the changed member is invalid
        """
        for field in PROFILE_FIELDS:
            if field in changes:
                setattr(member, field, changes[field])

        errors = self.validate(member)
        if errors:
            self.db.rollback()
            raise MemberValidationError(errors)

        await self.apply_geocoding(member)
        self._commit(member)
        self.db.refresh(member)
        return member

    def confirm(self, token: str) -> Member | None:
        """Confirm the member owning a confirmation token."""
        member = self.db.query(Member).filter(Member.confirmation_token == token).first()
        if not member:
            return None

        member.confirmed_at = datetime.now(UTC)
        member.confirmation_token = None
        self.db.commit()
        self.db.refresh(member)

        logger.info(f"Confirmed member {member.login_name}")
        return member

    def assign_role(self, member: Member, role_name: str) -> Role:
        """Give a member a role, creating the role if it does not exist yet."""
        role = self.db.query(Role).filter(Role.name == role_name).first()
        if not role:
            role = Role(name=role_name)
            self.db.add(role)
            self.db.flush()

        already_assigned = (
            self.db.query(MemberRole)
            .filter(MemberRole.member_id == member.id, MemberRole.role_id == role.id)
            .first()
        )
        if not already_assigned:
            self.db.add(MemberRole(member_id=member.id, role_id=role.id))
            logger.info(f"Assigned role {role.name!r} to {member.login_name}")

        self.db.commit()
        self.db.refresh(role)
        return role

    def member_summary(self, member: Member) -> dict[str, int]:
        """Count the things a member owns or has written."""
        return {
            "garden_count": len(member.gardens),
            "planting_count": len(member.plantings),
            "post_count": len(member.posts),
            "comment_count": len(member.comments),
            "forum_count": len(member.forums),
        }

    def _commit(self, member: Member) -> None:
        """Commit, turning unique-index races into validation errors."""
        attempted = {field: getattr(member, field) for field in VALIDATED_FIELDS}
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            # Rollback reloads persistent members; check what was submitted
            for field, value in attempted.items():
                setattr(member, field, value)
            errors = self.validate(member)
            if member.id is not None:
                self.db.rollback()
            if not errors:
                raise
            raise MemberValidationError(errors) from None
