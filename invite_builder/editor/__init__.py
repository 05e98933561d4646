"""Édition — historique undo/redo + session d'édition."""
from .history import EditingHistory, HistoryEntry
from .session import EditorSession, SaveResult

__all__ = ["EditingHistory", "HistoryEntry", "EditorSession", "SaveResult"]
