"""
Valeurs de design par défaut : dernier niveau de la chaîne de résolution
override → base → défaut. Chaque feuille de TemplateConfig a une entrée ici.
"""

DEFAULT_LAYOUT = {
    "maxWidth":     "100%",
    "padding":      "1rem",
    "spacing":      "1rem",
    "borderRadius": "0.5rem",
}

DEFAULT_COLORS = {
    "primary":       "#333333",
    "secondary":     "#666666",
    "accent":        "#d4af37",
    "background":    "#ffffff",
    "text":          "#000000",
    "textSecondary": "#666666",
    "border":        "#e5e5e5",
}

# Ordre fixe des 8 tokens de taille (xs → 4xl)
FONT_SIZE_TOKENS = ("xs", "sm", "base", "lg", "xl", "2xl", "3xl", "4xl")

DEFAULT_FONT_SIZES = {
    "xs":   "0.75rem",
    "sm":   "0.875rem",
    "base": "1rem",
    "lg":   "1.125rem",
    "xl":   "1.25rem",
    "2xl":  "1.5rem",
    "3xl":  "1.875rem",
    "4xl":  "2.25rem",
}

DEFAULT_TYPOGRAPHY = {
    "fontFamily":  "Inter, sans-serif",
    "headingFont": "Playfair Display, serif",
    "bodyFont":    "Inter, sans-serif",
    "fontSize":    DEFAULT_FONT_SIZES,
}

DEFAULT_ANIMATIONS = {
    "enabled":      True,
    "duration":     0.5,
    "easing":       "easeInOut",
    "staggerDelay": 0.1,
}
