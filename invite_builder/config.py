"""
Configuration invite_builder — lue depuis l'environnement.

  INVITE_BUILDER_DB_URL       → URL SQLAlchemy (SQLite par défaut)
  INVITE_BUILDER_MAX_HISTORY  → taille max de l'historique undo/redo
  INVITE_BUILDER_LOG_LEVEL    → niveau de log de l'app FastAPI
"""
import os
from pathlib import Path

DATA_DIR = Path(__file__).parent.parent / "data"

DB_URL      = os.getenv("INVITE_BUILDER_DB_URL", f"sqlite:///{DATA_DIR / 'invite_builder.db'}")
MAX_HISTORY = int(os.getenv("INVITE_BUILDER_MAX_HISTORY", "50"))
LOG_LEVEL   = os.getenv("INVITE_BUILDER_LOG_LEVEL", "INFO").upper()
