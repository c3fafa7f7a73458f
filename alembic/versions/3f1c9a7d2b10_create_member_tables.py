"""create member tables

Revision ID: 3f1c9a7d2b10
Revises:
Create Date: 2026-10-19 09:12:31.448201

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b10"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "members",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("login_name", sa.String(length=25), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("encrypted_password", sa.String(length=255), nullable=False),
        sa.Column("tos_agreement", sa.Boolean(), nullable=False),
        sa.Column("confirmation_token", sa.String(length=64), nullable=True, unique=True),
        sa.Column("confirmed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("show_email", sa.Boolean(), nullable=False),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("location", sa.String(length=255), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        *_timestamps(),
    )
    op.create_index(op.f("ix_members_id"), "members", ["id"], unique=False)
    op.create_index(op.f("ix_members_email"), "members", ["email"], unique=True)
    op.create_index(op.f("ix_members_confirmed_at"), "members", ["confirmed_at"], unique=False)
    # Case-insensitive uniqueness of login names
    op.create_index(
        "uq_members_login_name_lower", "members", [sa.text("lower(login_name)")], unique=True
    )

    op.create_table(
        "roles",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False, unique=True),
        sa.Column("description", sa.String(), nullable=True),
        *_timestamps(),
    )
    op.create_index(op.f("ix_roles_id"), "roles", ["id"], unique=False)

    op.create_table(
        "member_roles",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("member_id", sa.Integer(), sa.ForeignKey("members.id"), nullable=False),
        sa.Column("role_id", sa.Integer(), sa.ForeignKey("roles.id"), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("member_id", "role_id", name="uq_member_roles_member_role"),
    )
    op.create_index(op.f("ix_member_roles_id"), "member_roles", ["id"], unique=False)
    op.create_index(op.f("ix_member_roles_member_id"), "member_roles", ["member_id"], unique=False)
    op.create_index(op.f("ix_member_roles_role_id"), "member_roles", ["role_id"], unique=False)

    op.create_table(
        "gardens",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("owner_id", sa.Integer(), sa.ForeignKey("members.id"), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        *_timestamps(),
    )
    op.create_index(op.f("ix_gardens_id"), "gardens", ["id"], unique=False)
    op.create_index(op.f("ix_gardens_owner_id"), "gardens", ["owner_id"], unique=False)

    op.create_table(
        "plantings",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("garden_id", sa.Integer(), sa.ForeignKey("gardens.id"), nullable=False),
        sa.Column("crop_name", sa.String(length=255), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=True),
        sa.Column("planted_at", sa.Date(), nullable=True),
        sa.Column("description", sa.String(), nullable=True),
        *_timestamps(),
    )
    op.create_index(op.f("ix_plantings_id"), "plantings", ["id"], unique=False)
    op.create_index(op.f("ix_plantings_garden_id"), "plantings", ["garden_id"], unique=False)

    op.create_table(
        "forums",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("owner_id", sa.Integer(), sa.ForeignKey("members.id"), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index(op.f("ix_forums_id"), "forums", ["id"], unique=False)
    op.create_index(op.f("ix_forums_owner_id"), "forums", ["owner_id"], unique=False)

    op.create_table(
        "posts",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("author_id", sa.Integer(), sa.ForeignKey("members.id"), nullable=False),
        sa.Column("forum_id", sa.Integer(), sa.ForeignKey("forums.id"), nullable=True),
        sa.Column("subject", sa.String(length=255), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        *_timestamps(),
    )
    op.create_index(op.f("ix_posts_id"), "posts", ["id"], unique=False)
    op.create_index(op.f("ix_posts_author_id"), "posts", ["author_id"], unique=False)
    op.create_index(op.f("ix_posts_forum_id"), "posts", ["forum_id"], unique=False)

    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("post_id", sa.Integer(), sa.ForeignKey("posts.id"), nullable=False),
        sa.Column("author_id", sa.Integer(), sa.ForeignKey("members.id"), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        *_timestamps(),
    )
    op.create_index(op.f("ix_comments_id"), "comments", ["id"], unique=False)
    op.create_index(op.f("ix_comments_post_id"), "comments", ["post_id"], unique=False)
    op.create_index(op.f("ix_comments_author_id"), "comments", ["author_id"], unique=False)


def downgrade() -> None:
    op.drop_table("comments")
    op.drop_table("posts")
    op.drop_table("forums")
    op.drop_table("plantings")
    op.drop_table("gardens")
    op.drop_table("member_roles")
    op.drop_table("roles")
    op.drop_index("uq_members_login_name_lower", table_name="members")
    op.drop_table("members")
