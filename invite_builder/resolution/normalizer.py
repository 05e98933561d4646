"""
Normalisation des sections d'un template.

Deux formes historiques coexistent dans les données de templates :
  - canonique : liste ordonnée de descripteurs {id, type, isVisible, order, content, style}
  - legacy    : dict clé de type → réglages   {"hero": {"enabled": true, ...}, ...}

La forme est détectée une seule fois ici ; en aval tout le monde voit une liste.
"""
import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, List

log = logging.getLogger(__name__)


class SectionShape(str, Enum):
    CANONICAL = "canonical"
    LEGACY    = "legacy"
    INVALID   = "invalid"


def detect_section_shape(raw: Any) -> SectionShape:
    """Classe les données brutes de sections (liste, dict legacy ou autre)."""
    if isinstance(raw, (list, tuple)):
        return SectionShape.CANONICAL
    if isinstance(raw, Mapping):
        return SectionShape.LEGACY
    return SectionShape.INVALID


def legacy_to_descriptors(raw: Mapping) -> List[dict]:
    """
    Convertit le dict legacy en liste de descripteurs.

    Ordre = ordre des clés du dict. Les valeurs qui ne sont pas des dicts
    sont ignorées et ne consomment pas de slot d'ordre.
    Visible par défaut, sauf `enabled: false` explicite.
    """
    sections = []
    order = 0
    for key, settings in raw.items():
        if not isinstance(settings, Mapping):
            continue
        sections.append({
            "id":        key,
            "type":      key,
            "isVisible": settings.get("enabled") is not False,
            "order":     order,
            "content":   settings,
            "style":     {},
        })
        order += 1
    return sections


def normalize_sections(raw: Any) -> list:
    """
    Liste canonique de sections à partir de l'une ou l'autre forme.

    Liste déjà canonique → retournée telle quelle.
    Forme non reconnue (None, scalaire, chaîne) → [] sans lever d'erreur.
    """
    shape = detect_section_shape(raw)
    if shape is SectionShape.CANONICAL:
        return raw if isinstance(raw, list) else list(raw)
    if shape is SectionShape.LEGACY:
        return legacy_to_descriptors(raw)
    if raw is not None:
        log.debug("Sections ignorées (forme %s non reconnue)", type(raw).__name__)
    return []
