"""
Schémas Pydantic pour invite_builder.
Structure : Template → TemplateConfig → (layout, colors, typography, sections, animations)

Attributs Python en snake_case, noms JSON en camelCase (alias) :
les deux formes sont acceptées en entrée, model_dump(by_alias=True) rend le camelCase.
"""
from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .defaults import (
    DEFAULT_LAYOUT,
    DEFAULT_COLORS,
    DEFAULT_FONT_SIZES,
    DEFAULT_TYPOGRAPHY,
    DEFAULT_ANIMATIONS,
)

# Types de section connus : le champ `type` reste une chaîne ouverte
# (les templates legacy utilisent leurs clés comme type).
SECTION_TYPES = (
    "hero",
    "story",
    "event-details",
    "rsvp",
    "gallery",
    "guestbook",
    "map",
    "countdown",
    "gift",
    "closing",
    "bride-groom-details",
    "sacred-text",
    "blessing",
    "wishes",
    "wishes-messages",
)

TemplateCategory = Literal[
    "wedding", "birthday", "corporate", "anniversary",
    "graduation", "baby-shower", "holiday", "other",
]


class _CamelModel(BaseModel):
    """Base : alias camelCase + clés supplémentaires conservées."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


# ── Enregistrements visuels ─────────────────────────────────────────────────

class LayoutConfig(_CamelModel):
    max_width: str = DEFAULT_LAYOUT["maxWidth"]
    padding: str = DEFAULT_LAYOUT["padding"]
    spacing: str = DEFAULT_LAYOUT["spacing"]
    border_radius: str = DEFAULT_LAYOUT["borderRadius"]


class ColorConfig(_CamelModel):
    primary: str = DEFAULT_COLORS["primary"]
    secondary: str = DEFAULT_COLORS["secondary"]
    accent: str = DEFAULT_COLORS["accent"]
    background: str = DEFAULT_COLORS["background"]
    text: str = DEFAULT_COLORS["text"]
    text_secondary: str = DEFAULT_COLORS["textSecondary"]
    border: str = DEFAULT_COLORS["border"]


class TypographyConfig(_CamelModel):
    font_family: str = DEFAULT_TYPOGRAPHY["fontFamily"]
    heading_font: str = DEFAULT_TYPOGRAPHY["headingFont"]
    body_font: str = DEFAULT_TYPOGRAPHY["bodyFont"]
    font_size: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_FONT_SIZES))


class AnimationConfig(_CamelModel):
    """Effets d'animation, opaques pour le cœur (extras type particleEffects conservés)."""
    enabled: bool = DEFAULT_ANIMATIONS["enabled"]
    duration: float = DEFAULT_ANIMATIONS["duration"]
    easing: str = DEFAULT_ANIMATIONS["easing"]
    stagger_delay: float = DEFAULT_ANIMATIONS["staggerDelay"]


# ── Sections ────────────────────────────────────────────────────────────────

class SectionConfig(_CamelModel):
    """Unité rendable. `id` est la clé de fusion, `order` la séquence de rendu."""
    id: str
    type: str
    is_visible: bool = True
    order: int = 0
    content: Dict[str, Any] = Field(default_factory=dict)
    style: Dict[str, Any] = Field(default_factory=dict)


# ── Configuration résolue ───────────────────────────────────────────────────

class TemplateConfig(_CamelModel):
    """Configuration complète : chaque feuille a une valeur concrète."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    colors: ColorConfig = Field(default_factory=ColorConfig)
    typography: TypographyConfig = Field(default_factory=TypographyConfig)
    sections: List[SectionConfig] = Field(default_factory=list)
    animations: AnimationConfig = Field(default_factory=AnimationConfig)


# ── Catalogue ───────────────────────────────────────────────────────────────

class Template(_CamelModel):
    """
    Entrée du catalogue. `base_config` reste brut : les sections peuvent être
    au format canonique (liste) ou legacy (dict clé → réglages).
    """
    template_id: str
    category: TemplateCategory = "wedding"
    name: str
    description: str = ""
    base_config: Dict[str, Any] = Field(default_factory=dict)
    preview_image: str = ""
    is_premium: bool = False
    created_by: str = "system"
    tags: List[str] = Field(default_factory=list)
    popularity: int = 0
