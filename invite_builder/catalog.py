"""
Catalogue de templates intégré.

"classic-wedding" est volontairement conservé au format legacy
(sections = dict clé → réglages) : il est normalisé à la résolution.
"""
from typing import List, Optional

from .core.schemas import Template
from .errors import TemplateNotFoundError

_FONT_SIZES = {
    "xs": "0.75rem", "sm": "0.875rem", "base": "1rem", "lg": "1.125rem",
    "xl": "1.25rem", "2xl": "1.5rem", "3xl": "1.875rem", "4xl": "2.25rem",
}


def _section(section_type: str, order: int, visible: bool = True, **content) -> dict:
    return {
        "id": section_type, "type": section_type, "isVisible": visible,
        "order": order, "content": content, "style": {},
    }


_TEMPLATES = [
    {
        "templateId": "modern-elegance",
        "category": "wedding",
        "name": "Modern Elegance",
        "description": "Clean and sophisticated design perfect for contemporary weddings",
        "baseConfig": {
            "layout": {"maxWidth": "1200px", "padding": "0rem", "spacing": "0rem", "borderRadius": "0.5rem"},
            "colors": {
                "primary": "#db2777", "secondary": "#6b7280", "accent": "#f59e0b",
                "background": "#ffffff", "text": "#111827", "textSecondary": "#6b7280", "border": "#e5e7eb",
            },
            "typography": {
                "fontFamily": "Inter", "headingFont": "Playfair Display", "bodyFont": "Inter",
                "fontSize": _FONT_SIZES,
            },
            "sections": [
                _section("hero", 1),
                _section("sacred-text", 2),
                _section("bride-groom-details", 3),
                _section("story", 4),
                _section("event-details", 5),
                _section("countdown", 6),
                _section("wishes-messages", 7),
                _section("gift", 8, showBankAccounts=True, showEwallets=True, showShippingAddress=True),
                _section("closing", 9, includeThankYou=True, signatureNames=[]),
            ],
            "animations": {"enabled": True, "duration": 300, "easing": "easeOut", "staggerDelay": 100},
        },
        "previewImage": "/templates/modern-elegance-preview.jpg",
        "tags": ["modern", "elegant", "clean", "wedding"],
        "popularity": 95,
    },
    {
        "templateId": "romantic-garden",
        "category": "wedding",
        "name": "Romantic Garden",
        "description": "Soft and dreamy design inspired by blooming gardens",
        "baseConfig": {
            "layout": {"maxWidth": "100%", "padding": "0rem", "spacing": "0rem", "borderRadius": "1rem"},
            "colors": {
                "primary": "#ec4899", "secondary": "#8b5cf6", "accent": "#10b981",
                "background": "#fdf2f8", "text": "#374151", "textSecondary": "#6b7280", "border": "#f3f4f6",
            },
            "typography": {
                "fontFamily": "Dancing Script", "headingFont": "Dancing Script", "bodyFont": "Inter",
                "fontSize": _FONT_SIZES,
            },
            "sections": [
                _section("hero", 1),
                _section("story", 2),
                _section("gallery", 3, layout="masonry"),
                _section("event-details", 4),
                _section("map", 5, visible=False),
                _section("wishes-messages", 6),
                _section("closing", 7, includeThankYou=True),
            ],
            "animations": {
                "enabled": True, "duration": 500, "easing": "easeInOut", "staggerDelay": 150,
                "entranceAnimation": "fadeInUp", "parallaxScrolling": True,
            },
        },
        "previewImage": "/templates/romantic-garden-preview.jpg",
        "tags": ["romantic", "floral", "soft", "wedding"],
        "popularity": 88,
    },
    {
        "templateId": "classic-wedding",
        "category": "wedding",
        "name": "Classic Wedding",
        "description": "Timeless layout with traditional typography",
        "baseConfig": {
            "colors": {"primary": "#8b5a3c", "secondary": "#d4af37", "background": "#ffffff", "text": "#333333"},
            "typography": {"headingFont": "Cormorant Garamond", "bodyFont": "Lora"},
            "sections": {
                "hero": {"enabled": True, "title": "Wedding Invitation", "subtitle": "Join us"},
                "event-details": {"enabled": True},
                "gallery": {"enabled": False, "layout": "grid"},
                "rsvp": {"deadline": "2 weeks before"},
            },
        },
        "previewImage": "/templates/classic-wedding-preview.jpg",
        "tags": ["classic", "traditional", "wedding"],
        "popularity": 72,
    },
    {
        "templateId": "birthday-celebration",
        "category": "birthday",
        "name": "Birthday Celebration",
        "description": "Playful colors for birthday parties",
        "baseConfig": {
            "layout": {"maxWidth": "960px", "borderRadius": "1.5rem"},
            "colors": {"primary": "#f97316", "secondary": "#0ea5e9", "accent": "#facc15", "background": "#fffbeb"},
            "typography": {"headingFont": "Fredoka", "bodyFont": "Nunito"},
            "sections": [
                _section("hero", 1),
                _section("event-details", 2),
                _section("countdown", 3),
                _section("gallery", 4, layout="grid"),
                _section("wishes", 5),
            ],
            "animations": {"enabled": True, "duration": 400, "easing": "easeOut", "staggerDelay": 80},
        },
        "previewImage": "/templates/birthday-celebration-preview.jpg",
        "tags": ["birthday", "fun", "colorful"],
        "popularity": 64,
    },
]

TEMPLATES: List[Template] = [Template(**t) for t in _TEMPLATES]


def list_templates(category: Optional[str] = None) -> List[Template]:
    """Templates du catalogue, filtrés par catégorie si fournie."""
    if not category:
        return list(TEMPLATES)
    return [t for t in TEMPLATES if t.category == category]


def get_template(template_id: str) -> Template:
    for template in TEMPLATES:
        if template.template_id == template_id:
            return template
    raise TemplateNotFoundError(template_id)
