"""
Session d'édition — relie les éditions utilisateur à la résolution (aperçu live),
à l'historique undo/redo et au store (sauvegarde explicite).

Flux :
  fragment utilisateur → update_customization() → merge_configs() + select_sections()
  point de commit      → commit()               → EditingHistory
  save()               → store.save_invitation(customization, content)   (une à la fois)

Une instance par session ; aucun état global.
"""
import copy
import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Literal, Optional

from pydantic import BaseModel

from ..catalog import get_template
from ..core.schemas import SectionConfig, Template, TemplateConfig
from ..errors import TemplateNotFoundError
from ..resolution import merge_configs, select_sections
from ..storage.store import InvitationStore
from .history import EditingHistory

log = logging.getLogger(__name__)


class SaveResult(BaseModel):
    """Issue d'une sauvegarde : saved | skipped (déjà en cours / rien à sauver) | failed."""
    status: Literal["saved", "skipped", "failed"]
    error: Optional[str] = None
    saved_at: Optional[datetime] = None

    @property
    def ok(self) -> bool:
        return self.status == "saved"


class EditorSession:
    def __init__(
        self,
        store: Optional[InvitationStore] = None,
        history: Optional[EditingHistory] = None,
    ):
        self.store = store
        self.history = history if history is not None else EditingHistory()
        self.invitation_id: Optional[str] = None
        self.template: Optional[Template] = None
        self.customization: Dict[str, Any] = {}
        self.content: Dict[str, Any] = {}
        self.is_saving = False
        self.is_dirty = False
        self.last_saved: Optional[datetime] = None
        self.error: Optional[str] = None

    # ── Chargement / template ────────────────────────────────────────────────

    def load(self, invitation_id: str, template: Optional[Template] = None) -> None:
        """
        Reprend une invitation sauvegardée : customization + content du store,
        historique réinitialisé avec l'état chargé comme première entrée.
        Sans `template`, la base est celle de l'invitation (catalogue), ou
        aucune si son template_id est inconnu du catalogue.
        InvitationNotFoundError si l'id est inconnu.
        """
        if self.store is None:
            raise RuntimeError("Aucun store configuré pour cette session")
        stored = self.store.get_invitation(invitation_id)

        self.invitation_id = stored.invitation_id
        if template is None:
            try:
                template = get_template(stored.template_id)
            except TemplateNotFoundError:
                log.warning("Template %s absent du catalogue (invitation %s)", stored.template_id, invitation_id)
        self.template = template
        self.customization = copy.deepcopy(stored.customization)
        self.content = copy.deepcopy(stored.content)
        self.is_dirty = False
        self.error = None
        self.last_saved = stored.updated_at

        self.history.reset()
        self.commit()
        log.info("Invitation %s chargée", invitation_id)

    def set_template(self, template: Template) -> None:
        """
        Nouveau template de base : la customization et le contenu en cours sont
        abandonnés et l'historique vidé (ses entrées ne valent que pour une base).
        """
        self.template = template
        self.customization = {}
        self.content = {}
        self.is_dirty = True
        self.history.reset()
        self.commit()
        log.info("Template %s sélectionné", template.template_id)

    # ── Édition ──────────────────────────────────────────────────────────────

    def update_customization(self, fragment: Dict[str, Any]) -> None:
        """Merge superficiel d'un fragment de customization (pas de commit)."""
        self.customization = {**self.customization, **fragment}
        self.is_dirty = True

    def update_content(self, fragment: Dict[str, Any]) -> None:
        """Merge superficiel d'un fragment de contenu (pas de commit)."""
        self.content = {**self.content, **fragment}
        self.is_dirty = True

    def set_section_visibility(self, section_id: str, visible: bool) -> None:
        """Bascule explicite d'une section : écrit l'override puis commit."""
        existing = self.customization.get("sections")
        if isinstance(existing, Mapping):
            # customization au format legacy : on reste dans ce format
            sections = dict(existing)
            previous = sections.get(section_id)
            previous = previous if isinstance(previous, Mapping) else {}
            sections[section_id] = {**previous, "enabled": visible}
        else:
            sections = [dict(s) for s in existing or [] if isinstance(s, Mapping)]
            for section in sections:
                if section.get("id") == section_id:
                    section["isVisible"] = visible
                    break
            else:
                sections.append({"id": section_id, "isVisible": visible})
        self.update_customization({"sections": sections})
        self.commit()

    def commit(self) -> None:
        self.history.commit(self.customization, self.content)

    def undo(self) -> bool:
        return self._restore(self.history.undo())

    def redo(self) -> bool:
        return self._restore(self.history.redo())

    def can_undo(self) -> bool:
        return self.history.can_undo()

    def can_redo(self) -> bool:
        return self.history.can_redo()

    def _restore(self, entry) -> bool:
        if entry is None:
            return False
        # l'historique rend déjà des copies
        self.customization = entry.customization
        self.content = entry.content
        self.is_dirty = True
        return True

    # ── Aperçu ───────────────────────────────────────────────────────────────

    def resolved_config(self) -> TemplateConfig:
        base = self.template.base_config if self.template is not None else None
        return merge_configs(base, self.customization)

    def visible_sections(self, exclude_types: Iterable[str] = ()) -> List[SectionConfig]:
        return select_sections(self.resolved_config(), exclude_types)

    # ── Persistance ──────────────────────────────────────────────────────────

    def save(self) -> SaveResult:
        """
        Persiste (customization, content) tels quels. Une seule sauvegarde
        en vol : un appel concurrent est ignoré (skipped), pas mis en file.
        Un échec est rapporté sans retry ; l'état en mémoire reste intact.

        save() est synchrone : is_saving ne protège que des appels réentrants
        (callback du store) ou d'une session partagée entre threads.
        """
        if self.store is None or self.invitation_id is None or self.is_saving:
            return SaveResult(status="skipped")

        self.is_saving = True
        self.error = None
        try:
            self.store.save_invitation(self.invitation_id, self.customization, self.content)
        except Exception as e:
            self.error = str(e) or type(e).__name__
            log.warning("Sauvegarde %s échouée : %s", self.invitation_id, self.error)
            return SaveResult(status="failed", error=self.error)
        finally:
            self.is_saving = False

        self.is_dirty = False
        self.last_saved = datetime.now(timezone.utc)
        log.info("Invitation %s sauvegardée", self.invitation_id)
        return SaveResult(status="saved", saved_at=self.last_saved)

    def autosave(self) -> SaveResult:
        if not self.is_dirty or self.is_saving:
            return SaveResult(status="skipped")
        return self.save()

    def reset(self) -> None:
        self.invitation_id = None
        self.template = None
        self.customization = {}
        self.content = {}
        self.is_saving = False
        self.is_dirty = False
        self.last_saved = None
        self.error = None
        self.history.reset()
