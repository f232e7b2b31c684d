"""
tvmaterial.theme
~~~~~~~~~~~~~~~~
Dark TV colour scheme, the value types drawn by list items (shape, border,
glow) and the container → content contrast mapping.

Colours are plain strings understood by ``QColor`` (``#RRGGBB``,
``#AARRGGBB`` or a named colour such as ``transparent``).
"""

from __future__ import annotations
from dataclasses import dataclass

from PySide6.QtGui import QColor # type: ignore

TRANSPARENT = "transparent"


@dataclass(frozen=True)
class ColorScheme:
    primary: str                = "#A8C8FF"
    on_primary: str             = "#05305F"
    primary_container: str      = "#254777"
    on_primary_container: str   = "#D6E3FF"
    secondary: str              = "#BDC7DC"
    on_secondary: str           = "#273141"
    secondary_container: str    = "#3D4758"
    on_secondary_container: str = "#D9E3F8"
    tertiary: str               = "#DCBCE1"
    on_tertiary: str            = "#3E2845"
    tertiary_container: str     = "#563E5C"
    on_tertiary_container: str  = "#F9D8FE"
    background: str             = "#1A1C1E"
    on_background: str          = "#E3E2E6"
    surface: str                = "#1A1C1E"
    on_surface: str             = "#E3E2E6"
    surface_variant: str        = "#43474E"
    on_surface_variant: str     = "#C4C6CF"
    error: str                  = "#FFB4AB"
    on_error: str               = "#690005"
    error_container: str        = "#93000A"
    on_error_container: str     = "#FFB4AB"
    inverse_surface: str        = "#E4E2E6"
    inverse_on_surface: str     = "#303033"
    border: str                 = "#8E9099"


DEFAULT_SCHEME = ColorScheme()


@dataclass(frozen=True)
class RoundedCornerShape:
    radius: int = 0


@dataclass(frozen=True)
class Border:
    width: int = 0
    color: str = TRANSPARENT
    radius: int = 0

    @property
    def is_none(self) -> bool:
        return self.width <= 0


@dataclass(frozen=True)
class Glow:
    color: str = TRANSPARENT
    elevation: int = 0

    @property
    def is_none(self) -> bool:
        return self.elevation <= 0


NO_BORDER = Border()
NO_GLOW   = Glow()


# ── colour helpers ──────────────────────────────────────────────────────────
def same_color(a: str, b: str) -> bool:
    return QColor(a).rgba() == QColor(b).rgba()


def with_alpha(color: str, alpha: float) -> str:
    """Return *color* with its alpha channel replaced (``#AARRGGBB``)."""
    c = QColor(color)
    c.setAlphaF(max(0.0, min(alpha, 1.0)))
    return c.name(QColor.NameFormat.HexArgb)


def css_color(color: str) -> str:
    """Render *color* as a Qt style-sheet ``rgba()`` value."""
    c = QColor(color)
    return f"rgba({c.red()}, {c.green()}, {c.blue()}, {c.alpha()})"


def content_color_for(container: str, scheme: ColorScheme = DEFAULT_SCHEME) -> str:
    """Readable content colour for text/icons drawn on *container*.

    Colours that are not one of the scheme's container roles fall back to the
    ambient content colour (``on_surface``).
    """
    pairs = (
        (scheme.primary,             scheme.on_primary),
        (scheme.secondary,           scheme.on_secondary),
        (scheme.tertiary,            scheme.on_tertiary),
        (scheme.background,          scheme.on_background),
        (scheme.error,               scheme.on_error),
        (scheme.primary_container,   scheme.on_primary_container),
        (scheme.secondary_container, scheme.on_secondary_container),
        (scheme.tertiary_container,  scheme.on_tertiary_container),
        (scheme.error_container,     scheme.on_error_container),
        (scheme.inverse_surface,     scheme.inverse_on_surface),
        (scheme.surface,             scheme.on_surface),
        (scheme.surface_variant,     scheme.on_surface_variant),
    )
    for bg, fg in pairs:
        if same_color(container, bg):
            return fg
    return scheme.on_surface
