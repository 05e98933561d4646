"""Résolution de config — normalisation, fusion, sélection des sections."""
from .normalizer import SectionShape, detect_section_shape, normalize_sections
from .merger import layered_resolve, merge_configs, reconcile_sections
from .selector import select_sections

__all__ = [
    "SectionShape",
    "detect_section_shape",
    "normalize_sections",
    "layered_resolve",
    "merge_configs",
    "reconcile_sections",
    "select_sections",
]
