"""SQLAlchemy ORM models for operator profiles and divisions.

Authentication is handled outside this service; these rows are kept so
operator names can be resolved and managed through the record store.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from gatequeue.db.base import Base
from gatequeue.domain.mixins import TimestampMixin


class UserProfile(Base, TimestampMixin):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(100), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # "SECURITY" | "ADMIN" | "MANAGER"
    role: Mapped[str] = mapped_column(String(50), nullable=False)
    # "ACTIVE" | "INACTIVE"
    status: Mapped[str] = mapped_column(String(20), default="ACTIVE", nullable=False)


class Division(Base, TimestampMixin):
    __tablename__ = "divisions"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(50), nullable=False)
    theme: Mapped[Optional[str]] = mapped_column(String(50), default="slate", nullable=True)
