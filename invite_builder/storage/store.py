"""
Collaborateur de persistance vu par la session d'édition.

Interface étroite : charger (customization, content) d'une invitation,
sauvegarder la paire telle quelle. Les erreurs SQLAlchemy sont converties
en StorageError (SlugConflictError pour un slug déjà pris).
"""
import logging
from datetime import datetime
from typing import Any, Dict, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, Field
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from ..errors import InvitationNotFoundError, SlugConflictError, StorageError
from .database import (
    SessionLocal,
    db_create_invitation,
    db_get_invitation,
    db_update_invitation,
    jd,
    jdict,
)
from .models import InvitationDB

log = logging.getLogger(__name__)


class StoredInvitation(BaseModel):
    """Invitation telle que persistée (override + contenu, pas de config résolue)."""
    invitation_id: str
    template_id: str
    title: str = ""
    slug: Optional[str] = None
    status: str = "draft"
    customization: Dict[str, Any] = Field(default_factory=dict)
    content: Dict[str, Any] = Field(default_factory=dict)
    updated_at: Optional[datetime] = None


@runtime_checkable
class InvitationStore(Protocol):
    def get_invitation(self, invitation_id: str) -> StoredInvitation: ...
    def save_invitation(self, invitation_id: str, customization: dict, content: dict) -> StoredInvitation: ...


def _to_stored(row: InvitationDB) -> StoredInvitation:
    return StoredInvitation(
        invitation_id=row.invitation_id,
        template_id=row.template_id,
        title=row.title or "",
        slug=row.slug,
        status=row.status,
        customization=jdict(row.custom_theme),
        content=jdict(row.content),
        updated_at=row.updated_at,
    )


class SqlInvitationStore:
    """InvitationStore adossé à SQLAlchemy (SQLite par défaut)."""

    def __init__(self, session_factory: sessionmaker = SessionLocal):
        self.session_factory = session_factory

    def create_invitation(
        self,
        template_id: str,
        title: str = "",
        slug: Optional[str] = None,
        customization: Optional[dict] = None,
        content: Optional[dict] = None,
    ) -> StoredInvitation:
        try:
            with self.session_factory() as db:
                row = db_create_invitation(db, InvitationDB(
                    template_id=template_id,
                    title=title,
                    slug=slug,
                    custom_theme=jd(customization or {}),
                    content=jd(content or {}),
                ))
                log.info("Invitation %s créée (template %s)", row.invitation_id, template_id)
                return _to_stored(row)
        except IntegrityError as e:
            raise SlugConflictError(slug) from e
        except SQLAlchemyError as e:
            raise StorageError(f"Création impossible : {e}") from e

    def get_invitation(self, invitation_id: str) -> StoredInvitation:
        try:
            with self.session_factory() as db:
                row = db_get_invitation(db, invitation_id)
                if row is None:
                    raise InvitationNotFoundError(invitation_id)
                return _to_stored(row)
        except SQLAlchemyError as e:
            raise StorageError(f"Lecture impossible : {e}") from e

    def save_invitation(self, invitation_id: str, customization: dict, content: dict) -> StoredInvitation:
        try:
            with self.session_factory() as db:
                row = db_get_invitation(db, invitation_id)
                if row is None:
                    raise InvitationNotFoundError(invitation_id)
                row = db_update_invitation(
                    db, row,
                    custom_theme=jd(customization),
                    content=jd(content),
                )
                return _to_stored(row)
        except SQLAlchemyError as e:
            raise StorageError(f"Sauvegarde impossible : {e}") from e
