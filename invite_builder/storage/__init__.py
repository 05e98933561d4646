"""Persistance — modèle SQLAlchemy + store utilisé par la session d'édition."""
from .models import Base, InvitationDB, InvitationStatus
from .database import ENGINE, SessionLocal, init_db, make_engine, make_session_factory
from .store import InvitationStore, SqlInvitationStore, StoredInvitation

__all__ = [
    "Base", "InvitationDB", "InvitationStatus",
    "ENGINE", "SessionLocal", "init_db", "make_engine", "make_session_factory",
    "InvitationStore", "SqlInvitationStore", "StoredInvitation",
]
