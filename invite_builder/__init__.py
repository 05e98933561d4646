"""
invite_builder — résolution de templates d'invitation + historique d'édition.

Usage :
    >>> from invite_builder import get_template, merge_configs, select_sections
    >>> template = get_template("modern-elegance")
    >>> config = merge_configs(template.base_config, {"colors": {"primary": "#111111"}})
    >>> [s.id for s in select_sections(config)][:2]
    ['hero', 'sacred-text']

Session d'édition :
    >>> from invite_builder import EditorSession
    >>> session = EditorSession()
    >>> session.set_template(template)
    >>> session.update_customization({"colors": {"accent": "#ff0000"}})
    >>> session.commit()
    >>> session.undo()
    True
"""
from .core.schemas import (
    SECTION_TYPES,
    LayoutConfig,
    ColorConfig,
    TypographyConfig,
    AnimationConfig,
    SectionConfig,
    TemplateConfig,
    Template,
)
from .core.design_system import generate_css_variables, render_root_block
from .resolution import (
    SectionShape,
    detect_section_shape,
    normalize_sections,
    layered_resolve,
    merge_configs,
    reconcile_sections,
    select_sections,
)
from .editor import EditingHistory, HistoryEntry, EditorSession, SaveResult
from .catalog import list_templates, get_template
from .errors import InviteBuilderError, StorageError, InvitationNotFoundError, TemplateNotFoundError, SlugConflictError

__version__ = "0.1.0"

__all__ = [
    # schémas
    "SECTION_TYPES", "LayoutConfig", "ColorConfig", "TypographyConfig", "AnimationConfig",
    "SectionConfig", "TemplateConfig", "Template",
    # thème
    "generate_css_variables", "render_root_block",
    # résolution
    "SectionShape", "detect_section_shape", "normalize_sections",
    "layered_resolve", "merge_configs", "reconcile_sections", "select_sections",
    # édition
    "EditingHistory", "HistoryEntry", "EditorSession", "SaveResult",
    # catalogue
    "list_templates", "get_template",
    # erreurs
    "InviteBuilderError", "StorageError", "InvitationNotFoundError", "TemplateNotFoundError", "SlugConflictError",
]
