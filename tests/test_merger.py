"""Tests fusion base + customization — précédence par champ, sections par id, défauts."""
import copy

import pytest

from invite_builder.core.defaults import DEFAULT_COLORS, DEFAULT_FONT_SIZES
from invite_builder.core.schemas import TemplateConfig
from invite_builder.resolution.merger import layered_resolve, merge_configs, merge_record


def make_base():
    return {
        "layout": {"maxWidth": "1200px", "padding": "0rem", "spacing": "2rem", "borderRadius": "1rem"},
        "colors": {
            "primary": "#111111", "secondary": "#222222", "accent": "#333333", "background": "#ffffff",
            "text": "#000000", "textSecondary": "#444444", "border": "#555555",
        },
        "typography": {
            "fontFamily": "Inter", "headingFont": "Playfair Display", "bodyFont": "Lora",
            "fontSize": dict(DEFAULT_FONT_SIZES),
        },
        "sections": [
            {"id": "hero", "type": "hero", "isVisible": True, "order": 0, "content": {"a": 1}, "style": {"pad": "x"}},
            {"id": "story", "type": "story", "isVisible": False, "order": 1, "content": {}, "style": {}},
        ],
        "animations": {"enabled": True, "duration": 300, "easing": "easeOut", "staggerDelay": 100},
    }


def dump(config: TemplateConfig) -> dict:
    return config.model_dump(by_alias=True)


# ── layered_resolve ──────────────────────────────────────────────────────────

def test_layered_resolve_first_present_layer_wins():
    assert layered_resolve("k", {"k": 1}, {"k": 2}, default=3) == 1
    assert layered_resolve("k", {}, {"k": 2}, default=3) == 2
    assert layered_resolve("k", {}, {}, default=3) == 3


def test_layered_resolve_none_is_absent():
    assert layered_resolve("k", {"k": None}, {"k": 2}, default=3) == 2


def test_layered_resolve_empty_string_is_a_value():
    assert layered_resolve("k", {"k": ""}, {"k": "base"}, default="d") == ""


def test_layered_resolve_ignores_non_record_layers():
    assert layered_resolve("k", None, "junk", {"k": 2}) == 2


def test_merge_record_keeps_unknown_base_keys():
    merged = merge_record({"a": 1}, {"b": 2, "extra": "x"}, {"a": 0, "b": 0, "c": 0})
    assert merged == {"a": 1, "b": 2, "c": 0, "extra": "x"}


# ── Précédence ───────────────────────────────────────────────────────────────

def test_override_wins_per_field_siblings_survive():
    base = {"colors": {"primary": "#111", "secondary": "#222"}}
    config = merge_configs(base, {"colors": {"primary": "#fff"}})
    colors = dump(config)["colors"]

    assert colors["primary"] == "#fff"
    assert colors["secondary"] == "#222"
    assert colors["accent"] == DEFAULT_COLORS["accent"]
    assert colors["border"] == DEFAULT_COLORS["border"]


def test_override_none_falls_back_to_base():
    config = merge_configs({"colors": {"primary": "#111"}}, {"colors": {"primary": None}})
    assert config.colors.primary == "#111"


def test_layout_and_animation_extras_preserved():
    base = {"animations": {"entranceAnimation": "fadeInUp", "duration": 200}}
    config = merge_configs(base, {"animations": {"duration": 800}})
    animations = dump(config)["animations"]

    assert animations["entranceAnimation"] == "fadeInUp"
    assert animations["duration"] == 800
    assert animations["easing"] == "easeInOut"


def test_typography_resolves_each_font_size_token():
    base = {"typography": {"headingFont": "Lora", "fontSize": {"xs": "1px", "lg": "10px"}}}
    override = {"typography": {"bodyFont": "Nunito", "fontSize": {"lg": "2px"}}}
    typo = dump(merge_configs(base, override))["typography"]

    assert typo["headingFont"] == "Lora"
    assert typo["bodyFont"] == "Nunito"
    assert typo["fontFamily"] == "Inter, sans-serif"
    assert typo["fontSize"]["xs"] == "1px"
    assert typo["fontSize"]["lg"] == "2px"
    assert typo["fontSize"]["base"] == DEFAULT_FONT_SIZES["base"]
    assert set(typo["fontSize"]) == set(DEFAULT_FONT_SIZES)


# ── Identité / base absente ──────────────────────────────────────────────────

def test_empty_override_is_identity():
    base = make_base()
    result = dump(merge_configs(base, {}))

    assert result["layout"] == base["layout"]
    assert result["colors"] == base["colors"]
    assert result["typography"] == base["typography"]
    assert result["sections"] == base["sections"]
    assert result["animations"] == base["animations"]


def test_none_override_is_identity():
    base = make_base()
    assert dump(merge_configs(base, None)) == dump(merge_configs(base, {}))


def test_missing_base_uses_defaults():
    assert dump(merge_configs(None, {})) == dump(TemplateConfig())


def test_missing_base_driven_by_override():
    config = merge_configs(None, {"colors": {"accent": "#abcdef"}, "sections": [{"id": "hero"}]})
    assert config.colors.accent == "#abcdef"
    assert config.colors.primary == DEFAULT_COLORS["primary"]
    assert [s.id for s in config.sections] == ["hero"]
    assert config.sections[0].type == "hero"
    assert config.sections[0].is_visible is True


def test_merge_does_not_mutate_inputs():
    base = make_base()
    override = {"colors": {"primary": "#fff"}, "sections": [{"id": "hero", "content": {"b": 2}}]}
    base_before, override_before = copy.deepcopy(base), copy.deepcopy(override)

    merge_configs(base, override)

    assert base == base_before
    assert override == override_before


def test_template_config_model_accepted_as_base():
    base = merge_configs(make_base(), {})
    again = merge_configs(base, {})
    assert dump(again) == dump(base)


# ── Sections ─────────────────────────────────────────────────────────────────

def test_section_reconciled_by_id():
    base = {"sections": [{"id": "hero", "type": "hero", "isVisible": True, "order": 0, "content": {"a": 1}}]}
    override = {"sections": [{"id": "hero", "content": {"b": 2}}]}
    hero = merge_configs(base, override).sections[0]

    assert hero.content == {"a": 1, "b": 2}
    assert hero.order == 0
    assert hero.is_visible is True
    assert hero.type == "hero"


def test_section_override_content_wins_per_key():
    base = {"sections": [{"id": "hero", "type": "hero", "content": {"title": "A", "sub": "S"}}]}
    override = {"sections": [{"id": "hero", "content": {"title": "B"}}]}
    assert merge_configs(base, override).sections[0].content == {"title": "B", "sub": "S"}


def test_section_explicit_visibility_replaces_base():
    base = {"sections": [{"id": "hero", "type": "hero", "isVisible": True, "order": 0}]}
    override = {"sections": [{"id": "hero", "isVisible": False}]}
    assert merge_configs(base, override).sections[0].is_visible is False


def test_section_keeps_base_type_order_and_style():
    base = make_base()
    override = {"sections": [{"id": "hero", "type": "gallery", "order": 9, "style": {"pad": "y"}}]}
    hero = merge_configs(base, override).sections[0]
    assert hero.type == "hero"
    assert hero.order == 0
    assert hero.style == {"pad": "x"}


def test_unmatched_override_section_appended():
    base = make_base()
    override = {"sections": [
        {"id": "gallery", "type": "gallery", "content": {"layout": "grid"}},
        {"id": "story", "isVisible": True},
    ]}
    sections = merge_configs(base, override).sections

    assert [s.id for s in sections] == ["hero", "story", "gallery"]
    assert sections[1].is_visible is True
    assert sections[2].content == {"layout": "grid"}
    assert sections[2].order == 2


def test_appended_section_keeps_explicit_order():
    override = {"sections": [{"id": "map", "type": "map", "order": -1}]}
    sections = merge_configs(make_base(), override).sections
    assert sections[-1].id == "map"
    assert sections[-1].order == -1


def test_override_without_sections_keeps_base_list():
    base = make_base()
    sections = dump(merge_configs(base, {"colors": {"primary": "#fff"}}))["sections"]
    assert sections == base["sections"]


def test_legacy_base_sections_normalized():
    base = {"sections": {"hero": {"enabled": True, "title": "X"}, "gallery": {"enabled": False}}}
    sections = merge_configs(base, {}).sections

    assert [s.id for s in sections] == ["hero", "gallery"]
    assert [s.order for s in sections] == [0, 1]
    assert sections[1].is_visible is False
    assert sections[0].content == {"enabled": True, "title": "X"}


def test_legacy_override_without_enabled_keeps_base_visibility():
    base = {"sections": {"gallery": {"enabled": False}}}
    override = {"sections": {"gallery": {"layout": "masonry"}}}
    gallery = merge_configs(base, override).sections[0]

    assert gallery.is_visible is False
    assert gallery.content["layout"] == "masonry"


def test_legacy_override_with_enabled_sets_visibility():
    base = {"sections": [{"id": "gallery", "type": "gallery", "isVisible": False, "order": 3}]}
    override = {"sections": {"gallery": {"enabled": True}}}
    gallery = merge_configs(base, override).sections[0]
    assert gallery.is_visible is True
    assert gallery.order == 3


def test_malformed_section_entries_dropped():
    base = {"sections": ["junk", None, {"type": "story"}, {"content": {}}]}
    sections = merge_configs(base, {}).sections
    assert [s.id for s in sections] == ["story", "section-3"]


@pytest.mark.parametrize("raw", [None, 42, "sections"])
def test_invalid_sections_never_raise(raw):
    assert merge_configs({"sections": raw}, {"sections": raw}).sections == []
