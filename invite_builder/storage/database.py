"""SQLite — init + session + CRUD helpers"""
import json
from datetime import datetime
from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from ..config import DB_URL
from .models import Base, InvitationDB


def make_engine(url: str) -> Engine:
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


ENGINE       = make_engine(DB_URL)
SessionLocal = make_session_factory(ENGINE)


def init_db(engine: Engine = ENGINE):
    """Crée le dossier SQLite si besoin puis les tables."""
    if engine.url.drivername.startswith("sqlite") and engine.url.database not in (None, "", ":memory:"):
        Path(engine.url.database).parent.mkdir(parents=True, exist_ok=True)
    Base.metadata.create_all(bind=engine)


# ── JSON helpers ──
def jdict(s: Optional[str]) -> dict:
    try:
        value = json.loads(s or "{}")
    except ValueError:
        return {}
    return value if isinstance(value, dict) else {}

def jd(o) -> str:
    return json.dumps(o, ensure_ascii=False)


# ── Invitation ──
def db_create_invitation(db: Session, obj: InvitationDB) -> InvitationDB:
    db.add(obj); db.commit(); db.refresh(obj); return obj

def db_get_invitation(db: Session, invitation_id: str) -> Optional[InvitationDB]:
    return db.get(InvitationDB, invitation_id)

def db_update_invitation(db: Session, invitation: InvitationDB, **kwargs) -> InvitationDB:
    for k, v in kwargs.items():
        setattr(invitation, k, v)
    invitation.updated_at = datetime.utcnow()
    db.commit(); db.refresh(invitation); return invitation
