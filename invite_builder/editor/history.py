"""
Historique d'édition undo/redo — pile bornée avec pointeur.

    entries : [E0, E1, ..., En]     pointer : index de l'état courant (-1 si vide)

commit après un ou plusieurs undo → les entrées au-delà du pointeur sont
abandonnées (le futur n'est plus atteignable). Au-delà de max_entries,
les plus anciennes entrées sont oubliées en premier.

Les entrées rendues (commit, undo, redo, current, entries) sont des copies
profondes : les modifier ne touche pas l'historique stocké.
"""
import copy
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..config import MAX_HISTORY


class HistoryEntry(BaseModel):
    """Snapshot immuable d'une paire (customization, content)."""
    model_config = ConfigDict(frozen=True)

    customization: Dict[str, Any] = Field(default_factory=dict)
    content: Dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class EditingHistory:
    """Historique mono-utilisateur, en mémoire, une instance par session d'édition."""

    def __init__(self, max_entries: int = MAX_HISTORY):
        if max_entries < 1:
            raise ValueError(f"max_entries doit être >= 1 (reçu {max_entries})")
        self.max_entries = max_entries
        self._entries: List[HistoryEntry] = []
        self._pointer = -1

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> List[HistoryEntry]:
        return [e.model_copy(deep=True) for e in self._entries]

    @property
    def pointer(self) -> int:
        return self._pointer

    @property
    def current(self) -> Optional[HistoryEntry]:
        if self._pointer < 0:
            return None
        return self._entries[self._pointer].model_copy(deep=True)

    def commit(self, customization: Dict[str, Any], content: Dict[str, Any]) -> HistoryEntry:
        """
        Ajoute un snapshot (copies profondes) après le pointeur.

        Les muter ensuite dans l'appelant ne change pas l'entrée stockée.
        """
        del self._entries[self._pointer + 1:]

        entry = HistoryEntry(
            customization=copy.deepcopy(customization or {}),
            content=copy.deepcopy(content or {}),
        )
        self._entries.append(entry)

        overflow = len(self._entries) - self.max_entries
        if overflow > 0:
            del self._entries[:overflow]

        self._pointer = len(self._entries) - 1
        return entry.model_copy(deep=True)

    def undo(self) -> Optional[HistoryEntry]:
        """Recule d'un cran ; None (no-op) si déjà au début."""
        if not self.can_undo():
            return None
        self._pointer -= 1
        return self.current

    def redo(self) -> Optional[HistoryEntry]:
        """Avance d'un cran ; None (no-op) si déjà à la fin."""
        if not self.can_redo():
            return None
        self._pointer += 1
        return self.current

    def can_undo(self) -> bool:
        return self._pointer > 0

    def can_redo(self) -> bool:
        return self._pointer < len(self._entries) - 1

    def reset(self) -> None:
        self._entries.clear()
        self._pointer = -1
