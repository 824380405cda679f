"""SQLAlchemy ORM models for the portfolio content tables.

Multi-value text columns hold canonical delimited text (``badges``,
``metrics``, ``bullets``) or a JSON array (``images``).
"""

from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio.infrastructure.database.base import Base

SINGLETON_ID = 1


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _text_column(nullable: bool = True, default: str = "") -> Mapped[str]:
    if not nullable:
        return mapped_column(Text, nullable=False)
    return mapped_column(Text, nullable=True, default=default, server_default=text(f"'{default}'"))


def _created_at_column() -> Mapped[datetime]:
    return mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
        index=True,
    )


def _updated_at_column() -> Mapped[datetime]:
    return mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        onupdate=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=True,
    )


class ProjectModel(Base):
    """ORM model — maps to the 'projects' table."""

    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    tag: Mapped[str] = _text_column(nullable=False)
    title: Mapped[str] = _text_column(nullable=False)
    description: Mapped[str] = _text_column(nullable=False)
    bullets: Mapped[str | None] = _text_column()
    link_label: Mapped[str | None] = _text_column()
    link_url: Mapped[str | None] = _text_column()
    image: Mapped[str | None] = _text_column()
    images: Mapped[str | None] = _text_column(default="[]")
    created_at: Mapped[datetime] = _created_at_column()

    def __repr__(self) -> str:
        return f"<ProjectModel(id={self.id}, title='{self.title}')>"


class SkillModel(Base):
    """ORM model — maps to the 'skills' table."""

    __tablename__ = "skills"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = _text_column(nullable=False)
    details: Mapped[str] = _text_column(nullable=False)
    created_at: Mapped[datetime] = _created_at_column()


class BlogModel(Base):
    """ORM model — maps to the 'blogs' table."""

    __tablename__ = "blogs"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = _text_column(nullable=False)
    summary: Mapped[str] = _text_column(nullable=False)
    link: Mapped[str] = _text_column(nullable=False)
    images: Mapped[str | None] = _text_column(default="[]")
    created_at: Mapped[datetime] = _created_at_column()

    def __repr__(self) -> str:
        return f"<BlogModel(id={self.id}, title='{self.title}')>"


class CertificationModel(Base):
    """ORM model — maps to the 'certifications' table."""

    __tablename__ = "certifications"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = _text_column(nullable=False)
    issuer: Mapped[str | None] = _text_column()
    year: Mapped[str | None] = _text_column()
    description: Mapped[str | None] = _text_column()
    created_at: Mapped[datetime] = _created_at_column()


class FeaturedSkillModel(Base):
    """ORM model — maps to the 'featured_skills' table (contact links)."""

    __tablename__ = "featured_skills"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = _text_column(nullable=False)
    details: Mapped[str | None] = _text_column()
    created_at: Mapped[datetime] = _created_at_column()


class AboutModel(Base):
    """ORM model — the single-row 'about' table."""

    __tablename__ = "about"
    __table_args__ = (CheckConstraint(f"id = {SINGLETON_ID}", name="singleton"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=False)
    heading: Mapped[str | None] = _text_column()
    summary: Mapped[str | None] = _text_column()
    bullets: Mapped[str | None] = _text_column()
    photo: Mapped[str | None] = _text_column()
    updated_at: Mapped[datetime | None] = _updated_at_column()


class HeroContentModel(Base):
    """ORM model — the single-row 'hero_content' table."""

    __tablename__ = "hero_content"
    __table_args__ = (CheckConstraint(f"id = {SINGLETON_ID}", name="singleton"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=False)
    tagline: Mapped[str | None] = _text_column()
    headline: Mapped[str | None] = _text_column()
    subheading: Mapped[str | None] = _text_column()
    badges: Mapped[str | None] = _text_column()
    metrics: Mapped[str | None] = _text_column()
    primary_label: Mapped[str | None] = _text_column()
    primary_url: Mapped[str | None] = _text_column()
    secondary_label: Mapped[str | None] = _text_column()
    secondary_url: Mapped[str | None] = _text_column()
    updated_at: Mapped[datetime | None] = _updated_at_column()
