"""Member model."""

from sqlalchemy import Boolean, Column, DateTime, Float, Index, Integer, String, Text, func
from sqlalchemy.orm import Query, Session, relationship

from src.database import Base
from src.models.mixins import TimestampMixin
from src.models.role import normalize_role_name


class Member(Base, TimestampMixin):
    """A registered member of the site.

    ``login_name`` is stored exactly as typed but is unique case-insensitively
    (see the functional index below). ``latitude`` and ``longitude`` are filled
    in by the geocoding hook in ``MemberService`` and are either both set or
    both null.
    """

    __tablename__ = "members"

    id = Column(Integer, primary_key=True, index=True)
    login_name = Column(String(25), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    encrypted_password = Column(String(255), nullable=False)
    tos_agreement = Column(Boolean, nullable=False, default=False)
    confirmation_token = Column(String(64), nullable=True, unique=True)
    confirmed_at = Column(DateTime(timezone=True), nullable=True, index=True)
    show_email = Column(Boolean, nullable=False, default=False)
    bio = Column(Text, nullable=True)
    location = Column(String(255), nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)

    # Relationships
    gardens = relationship(
        "Garden", back_populates="owner", cascade="all, delete-orphan", order_by="Garden.id"
    )
    plantings = relationship("Planting", secondary="gardens", viewonly=True)
    posts = relationship("Post", back_populates="author", order_by="Post.id")
    comments = relationship("Comment", back_populates="author", order_by="Comment.id")
    forums = relationship("Forum", back_populates="owner", order_by="Forum.id")
    role_assignments = relationship(
        "MemberRole", back_populates="member", cascade="all, delete-orphan"
    )
    roles = relationship("Role", secondary="member_roles", viewonly=True, order_by="Role.id")

    def __str__(self) -> str:
        return self.login_name

    def __repr__(self) -> str:
        return f"<Member {self.login_name}>"

    @property
    def slug(self) -> str:
        """Public identifier used in URLs."""
        return self.login_name

    @property
    def is_confirmed(self) -> bool:
        return self.confirmed_at is not None

    def has_role(self, role_name) -> bool:
        """Check whether the member holds a role.

        Stored role names may contain spaces ("crop wrangler"); they are
        compared with spaces turned into underscores ("crop_wrangler").
        """
        wanted = getattr(role_name, "value", role_name)
        return any(normalize_role_name(role.name) == wanted for role in self.roles)

    @classmethod
    def ordered(cls, db: Session) -> Query:
        """All members, alphabetically by login name."""
        return db.query(cls).order_by(func.lower(cls.login_name))

    @classmethod
    def confirmed(cls, db: Session) -> Query:
        """Members who have confirmed their account."""
        return cls.ordered(db).filter(cls.confirmed_at.isnot(None))

    @classmethod
    def interesting(cls, db: Session) -> Query:
        """Confirmed members, most recently active first."""
        return (
            db.query(cls)
            .filter(cls.confirmed_at.isnot(None))
            .order_by(cls.updated_at.desc())
        )


Index("uq_members_login_name_lower", func.lower(Member.login_name), unique=True)
