"""
Fusion config de base + customization utilisateur → TemplateConfig complète.

Chaque feuille suit la même chaîne à trois niveaux (layered_resolve) :
    override (présent et non None) → base (présent et non None) → défaut de design

Les sections ne sont pas remplacées en bloc : elles sont réconciliées par `id`.
Les dicts d'entrée utilisent les noms camelCase (format JSON des templates).
"""
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel

from ..core.defaults import (
    DEFAULT_LAYOUT,
    DEFAULT_COLORS,
    DEFAULT_FONT_SIZES,
    DEFAULT_TYPOGRAPHY,
    DEFAULT_ANIMATIONS,
)
from ..core.schemas import SectionConfig, TemplateConfig
from .normalizer import SectionShape, detect_section_shape, legacy_to_descriptors, normalize_sections


def _record(obj: Any) -> Mapping:
    """Vue dict d'un enregistrement (dict, modèle Pydantic) ; {} sinon."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(by_alias=True)
    if isinstance(obj, Mapping):
        return obj
    return {}


def layered_resolve(key: str, *layers: Any, default: Any = None) -> Any:
    """Première valeur non None de `key` dans les couches, sinon `default`."""
    for layer in layers:
        value = _record(layer).get(key)
        if value is not None:
            return value
    return default


def merge_record(override: Any, base: Any, defaults: Mapping) -> Dict[str, Any]:
    """
    Merge superficiel override > base > défauts, clé par clé.

    Toutes les clés de la base survivent, y compris celles que les défauts
    ne connaissent pas ; l'override n'écrase que ses clés présentes.
    """
    override, base = _record(override), _record(base)
    keys = list(defaults)
    keys += [k for k in base if k not in defaults]
    keys += [k for k in override if k not in defaults and k not in base]
    return {k: layered_resolve(k, override, base, default=defaults.get(k)) for k in keys}


def merge_typography(override: Any, base: Any) -> Dict[str, Any]:
    """Même chaîne que merge_record, descendue jusqu'à chaque token de fontSize."""
    override, base = _record(override), _record(base)
    merged = merge_record(override, base, DEFAULT_TYPOGRAPHY)
    merged["fontSize"] = merge_record(override.get("fontSize"), base.get("fontSize"), DEFAULT_FONT_SIZES)
    return merged


# ── Sections ────────────────────────────────────────────────────────────────

def _section_fields(section: Any, position: int) -> Optional[dict]:
    """Descripteur brut → dict aux champs garantis (None si inexploitable)."""
    if isinstance(section, BaseModel):
        section = section.model_dump(by_alias=True)
    if not isinstance(section, Mapping):
        return None

    fields = dict(section)
    section_id = fields.get("id") or fields.get("type") or f"section-{position}"
    fields["id"] = str(section_id)
    fields["type"] = fields.get("type") or fields["id"]
    content = fields.get("content")
    fields["content"] = dict(content) if isinstance(content, Mapping) else {}
    style = fields.get("style")
    fields["style"] = dict(style) if isinstance(style, Mapping) else {}
    if fields.get("isVisible") is None:
        fields.pop("isVisible", None)
    return fields


def _override_sections(raw: Any) -> List[Tuple[dict, bool]]:
    """
    Sections de la customization, avec un flag « visibilité explicite ».

    Forme canonique : explicite si la clé isVisible est présente.
    Forme legacy : explicite si la clé enabled est présente.
    """
    if detect_section_shape(raw) is SectionShape.LEGACY:
        explicit = {key for key, settings in raw.items() if isinstance(settings, Mapping) and "enabled" in settings}
        descriptors = legacy_to_descriptors(raw)
        return [(_section_fields(d, i), d["id"] in explicit) for i, d in enumerate(descriptors)]

    result = []
    for position, section in enumerate(normalize_sections(raw)):
        fields = _section_fields(section, position)
        if fields is None:
            continue
        result.append((fields, fields.get("isVisible") is not None))
    return result


def reconcile_sections(base_raw: Any, override_raw: Any = None) -> List[SectionConfig]:
    """
    Réconcilie les sections de base et de customization par `id`.

    - section de base avec override : type/order/style de la base,
      content = base ∪ override (override gagne), isVisible remplacé
      seulement si l'override l'a fixé explicitement
    - sections d'override sans correspondance : ajoutées en fin de liste
    - override_raw None : liste de base normalisée telle quelle
    """
    base_sections = []
    for position, section in enumerate(normalize_sections(base_raw)):
        fields = _section_fields(section, position)
        if fields is not None:
            if fields.get("order") is None:
                fields["order"] = 0
            base_sections.append(fields)

    if override_raw is None:
        return [SectionConfig(**s) for s in base_sections]

    overrides = _override_sections(override_raw)
    by_id: Dict[str, Tuple[dict, bool]] = {}
    for fields, explicit in overrides:
        by_id.setdefault(fields["id"], (fields, explicit))

    merged = []
    for base in base_sections:
        match = by_id.get(base["id"])
        if match is None:
            merged.append(base)
            continue
        custom, explicit = match
        section = dict(base)
        section["content"] = {**base["content"], **custom["content"]}
        if explicit:
            section["isVisible"] = custom["isVisible"]
        merged.append(section)

    known = {s["id"] for s in base_sections}
    for custom, _ in overrides:
        if custom["id"] in known:
            continue
        known.add(custom["id"])
        section = dict(custom)
        if section.get("order") is None:
            section["order"] = max((s["order"] for s in merged), default=-1) + 1
        merged.append(section)

    return [SectionConfig(**s) for s in merged]


# ── Config complète ─────────────────────────────────────────────────────────

def merge_configs(base: Any = None, override: Any = None) -> TemplateConfig:
    """
    Config résolue à partir d'une base (éventuellement absente ou legacy)
    et d'une customization partielle.

    Pure : peut être appelée à chaque rendu. base None → {}.
    Override vide → base normalisée complétée par les défauts.
    """
    base, override = _record(base), _record(override)

    return TemplateConfig(
        layout=merge_record(override.get("layout"), base.get("layout"), DEFAULT_LAYOUT),
        colors=merge_record(override.get("colors"), base.get("colors"), DEFAULT_COLORS),
        typography=merge_typography(override.get("typography"), base.get("typography")),
        sections=reconcile_sections(base.get("sections"), override.get("sections")),
        animations=merge_record(override.get("animations"), base.get("animations"), DEFAULT_ANIMATIONS),
    )
