"""
Modèle de persistance — InvitationDB (SQLAlchemy 2.x, SQLite par défaut).
Seule la customization (override) est stockée, jamais la config résolue :
une mise à jour du template de base continue donc de s'appliquer.
"""
import uuid
from datetime import datetime
from enum import Enum
from typing import Optional

import sqlalchemy as sa
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class InvitationStatus(str, Enum):
    DRAFT     = "draft"
    PUBLISHED = "published"
    ARCHIVED  = "archived"
    EXPIRED   = "expired"


class InvitationDB(Base):
    __tablename__ = "invitations"
    invitation_id: Mapped[str]           = mapped_column(sa.String, primary_key=True, default=lambda: str(uuid.uuid4()))
    template_id:   Mapped[str]           = mapped_column(sa.String, nullable=False, index=True)
    title:         Mapped[str]           = mapped_column(sa.String, default="")
    slug:          Mapped[Optional[str]] = mapped_column(sa.String, nullable=True, unique=True)
    status:        Mapped[str]           = mapped_column(sa.String, default=InvitationStatus.DRAFT.value)
    custom_theme:  Mapped[str]           = mapped_column(sa.Text, default="{}")  # JSON customization
    content:       Mapped[str]           = mapped_column(sa.Text, default="{}")  # JSON contenu
    created_at:    Mapped[datetime]      = mapped_column(sa.DateTime, default=datetime.utcnow)
    updated_at:    Mapped[datetime]      = mapped_column(sa.DateTime, default=datetime.utcnow)
