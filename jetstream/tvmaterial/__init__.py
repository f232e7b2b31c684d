"""
tvmaterial
~~~~~~~~~~
TV-style themed widgets.

•  `interaction` / `state_style` / `list_item_defaults` are pure data and
   functions: interaction flags → state → resolved visual values.
•  `surface`, `list_item`, `chip` are the Qt widgets that draw them.
"""

from jetstream.tvmaterial.interaction import InteractionState, InteractionFlags, resolve_state
from jetstream.tvmaterial.state_style import StateStyle
from jetstream.tvmaterial.theme import (
    ColorScheme, DEFAULT_SCHEME, Border, Glow, RoundedCornerShape,
    NO_BORDER, NO_GLOW, content_color_for, with_alpha,
)
from jetstream.tvmaterial.list_item_defaults import (
    ListItemDefaults, ListItemStyle, ResolvedListItemStyle,
)
from jetstream.tvmaterial.surface   import StyledSurface
from jetstream.tvmaterial.list_item import ListItem
from jetstream.tvmaterial.chip      import FilterChip, filter_chip_style

__all__ = [
    "InteractionState", "InteractionFlags", "resolve_state",
    "StateStyle",
    "ColorScheme", "DEFAULT_SCHEME", "Border", "Glow", "RoundedCornerShape",
    "NO_BORDER", "NO_GLOW", "content_color_for", "with_alpha",
    "ListItemDefaults", "ListItemStyle", "ResolvedListItemStyle",
    "StyledSurface", "ListItem", "FilterChip", "filter_chip_style",
]
