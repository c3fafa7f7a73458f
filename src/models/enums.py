"""Enums for model fields."""

from enum import Enum


class RoleName(str, Enum):
    """Well-known role names checked by the application.

    Values are the normalized form compared by ``Member.has_role``.
    """

    ADMIN = "admin"
    MODERATOR = "moderator"
    CROP_WRANGLER = "crop_wrangler"
