"""Core module pour invite_builder."""
from .schemas import (
    SECTION_TYPES,
    LayoutConfig,
    ColorConfig,
    TypographyConfig,
    AnimationConfig,
    SectionConfig,
    TemplateConfig,
    Template,
)
from .design_system import generate_css_variables, render_root_block

__all__ = [
    "SECTION_TYPES",
    "LayoutConfig",
    "ColorConfig",
    "TypographyConfig",
    "AnimationConfig",
    "SectionConfig",
    "TemplateConfig",
    "Template",
    "generate_css_variables",
    "render_root_block",
]
