"""Terminal styling."""

from caretline.style.state import default_style, set_color_enabled
from caretline.style.style import COLORED, PLAIN, Style, supports_color

__all__ = [
    "COLORED",
    "PLAIN",
    "Style",
    "default_style",
    "set_color_enabled",
    "supports_color",
]
