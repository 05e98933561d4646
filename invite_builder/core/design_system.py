"""
Variables de thème dérivées d'une TemplateConfig résolue.

Produit une map inerte {"--template-primary-hue": "330", ...} ; l'appliquer
(DOM, :root CSS, thème natif…) reste l'affaire du renderer.
"""
import colorsys
from typing import Dict, Tuple

from .schemas import TemplateConfig

# Couleurs décomposées en hue/saturation/lightness (les autres passent telles quelles)
_HSL_ROLES = ("primary", "secondary", "accent")


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convertit #RRGGBB (ou #RGB) en (R, G, B). ValueError si non hexadécimal."""
    value = hex_color.strip().lstrip("#")
    if len(value) == 3:
        value = "".join(c * 2 for c in value)
    if len(value) != 6:
        raise ValueError(f"Couleur hexadécimale invalide : {hex_color!r}")
    return tuple(int(value[i:i+2], 16) for i in (0, 2, 4))


def hex_to_hsl(hex_color: str) -> Tuple[int, int, int]:
    """#RRGGBB → (hue 0-360, saturation %, lightness %) arrondis."""
    r, g, b = (c / 255 for c in hex_to_rgb(hex_color))
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return round(h * 360), round(s * 100), round(l * 100)


def generate_css_variables(config: TemplateConfig) -> Dict[str, str]:
    """
    Map des variables CSS du thème.

    Returns:
        {nom de variable: valeur} : couleurs, polices, tailles, layout
    """
    colors = config.colors
    variables: Dict[str, str] = {}

    for role in _HSL_ROLES:
        try:
            h, s, l = hex_to_hsl(getattr(colors, role))
        except ValueError:
            continue  # rgb(), var(), nom de couleur : pas de décomposition
        variables[f"--template-{role}-hue"] = str(h)
        variables[f"--template-{role}-saturation"] = f"{s}%"
        variables[f"--template-{role}-lightness"] = f"{l}%"

    variables["--template-background"] = colors.background
    variables["--template-text"] = colors.text
    variables["--template-text-secondary"] = colors.text_secondary
    variables["--template-border"] = colors.border

    typo = config.typography
    variables["--font-heading"] = typo.heading_font
    variables["--font-body"] = typo.body_font
    for token, size in typo.font_size.items():
        variables[f"--font-size-{token}"] = size

    layout = config.layout
    variables["--layout-max-width"] = layout.max_width
    variables["--layout-padding"] = layout.padding
    variables["--layout-spacing"] = layout.spacing
    variables["--layout-border-radius"] = layout.border_radius

    return variables


def render_root_block(variables: Dict[str, str]) -> str:
    """Formate les variables en bloc :root { ... }."""
    lines = [f"  {name}: {value};" for name, value in variables.items()]
    return ":root {\n" + "\n".join(lines) + "\n}"
