"""Sélection des sections à rendre : visibles uniquement, triées par `order`."""
from typing import Iterable, List

from ..core.schemas import SectionConfig, TemplateConfig


def select_sections(config: TemplateConfig, exclude_types: Iterable[str] = ()) -> List[SectionConfig]:
    """
    Sections visibles de la config résolue, par `order` croissant.

    Tri stable : à `order` égal, l'ordre de la liste est conservé.
    `exclude_types` retire des types entiers (ex: aperçu sans "hero").
    """
    excluded = set(exclude_types)
    visible = [
        s for s in config.sections
        if s.is_visible is True and s.type not in excluded
    ]
    return sorted(visible, key=lambda s: s.order)
