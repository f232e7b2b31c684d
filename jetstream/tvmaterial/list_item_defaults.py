"""
tvmaterial.list_item_defaults
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Default values and builders for list-item styling.

Every builder takes keyword overrides; ``None`` (the default for most of them)
leaves a state unset so it borrows from its fallback state. The records are
plain data: `ListItemStyle.resolve(state)` is a pure function.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from jetstream.tvmaterial.interaction import InteractionState, resolve_state
from jetstream.tvmaterial.state_style import (
    StateStyle,
    SHAPE_FALLBACKS, SCALE_FALLBACKS, BORDER_FALLBACKS, GLOW_FALLBACKS, COLOR_FALLBACKS,
)
from jetstream.tvmaterial.theme import (
    Border, ColorScheme, DEFAULT_SCHEME, Glow, NO_BORDER, NO_GLOW,
    RoundedCornerShape, TRANSPARENT, content_color_for, css_color, with_alpha,
)

S = InteractionState


# ── records ─────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class ListItemShape:
    style: StateStyle[RoundedCornerShape]

    def resolve(self, state: S) -> RoundedCornerShape:
        return self.style.resolve(state)


@dataclass(frozen=True)
class ListItemColors:
    container: StateStyle[str]
    content: StateStyle[str]

    def resolve(self, state: S) -> Tuple[str, str]:
        """(container colour, content colour) for *state*."""
        return self.container.resolve(state), self.content.resolve(state)


@dataclass(frozen=True)
class ListItemScale:
    style: StateStyle[float]

    def resolve(self, state: S) -> float:
        return self.style.resolve(state)


@dataclass(frozen=True)
class ListItemBorder:
    style: StateStyle[Border]

    def resolve(self, state: S) -> Border:
        return self.style.resolve(state)


@dataclass(frozen=True)
class ListItemGlow:
    style: StateStyle[Glow]

    def resolve(self, state: S) -> Glow:
        return self.style.resolve(state)


@dataclass(frozen=True)
class ResolvedListItemStyle:
    shape: RoundedCornerShape
    container_color: str
    content_color: str
    scale: float
    border: Border
    glow: Glow

    def stylesheet(self, selector: str = "QFrame#ListItem") -> str:
        """Qt style sheet for the container and the labels inside it."""
        if self.border.is_none:
            border = "border: none;"
        else:
            border = f"border: {self.border.width}px solid {css_color(self.border.color)};"
        return (
            f"{selector} {{"
            f" background-color: {css_color(self.container_color)};"
            f" border-radius: {self.shape.radius}px; {border} }}\n"
            f"{selector} QLabel {{"
            f" color: {css_color(self.content_color)}; background: transparent; }}"
        )


@dataclass(frozen=True)
class ListItemStyle:
    shape: ListItemShape
    colors: ListItemColors
    scale: ListItemScale
    border: ListItemBorder
    glow: ListItemGlow

    def resolve(self, state: S) -> ResolvedListItemStyle:
        container, content = self.colors.resolve(state)
        return ResolvedListItemStyle(
            shape=self.shape.resolve(state),
            container_color=container,
            content_color=content,
            scale=self.scale.resolve(state),
            border=self.border.resolve(state),
            glow=self.glow.resolve(state),
        )

    def resolve_flags(
        self, enabled: bool = True, focused: bool = False,
        pressed: bool = False, selected: bool = False,
    ) -> ResolvedListItemStyle:
        return self.resolve(resolve_state(enabled, focused, pressed, selected))

    def stylesheet(self, state: S, selector: str = "QFrame#ListItem") -> str:
        return self.resolve(state).stylesheet(selector)


# ── defaults + builders ─────────────────────────────────────────────────────
class ListItemDefaults:
    """Default values used by list items."""

    ICON_SIZE_DENSE = 18
    ICON_SIZE       = 32

    LEADING_CONTENT_OPACITY    = 0.8
    OVERLINE_CONTENT_OPACITY   = 0.6
    SUPPORTING_CONTENT_OPACITY = 0.8

    LEADING_CONTENT_END_PADDING    = 8
    TRAILING_CONTENT_START_PADDING = 8

    CONTENT_PADDING = (16, 12)                  # horizontal, vertical

    MIN_CONTAINER_HEIGHT                 = 48
    MIN_CONTAINER_HEIGHT_LEADING_CONTENT = 56
    MIN_CONTAINER_HEIGHT_TWO_LINE        = 64
    MIN_CONTAINER_HEIGHT_THREE_LINE      = 80

    SHAPE = RoundedCornerShape(8)

    @staticmethod
    def emphasis_border(scheme: ColorScheme = DEFAULT_SCHEME) -> Border:
        """2px border in the scheme's border colour (focused-but-disabled)."""
        return Border(width=2, color=scheme.border, radius=ListItemDefaults.SHAPE.radius)

    @staticmethod
    def shape(
        shape: RoundedCornerShape = SHAPE,
        focused_shape: Optional[RoundedCornerShape] = None,
        pressed_shape: Optional[RoundedCornerShape] = None,
        selected_shape: Optional[RoundedCornerShape] = None,
        disabled_shape: Optional[RoundedCornerShape] = None,
        focused_selected_shape: Optional[RoundedCornerShape] = None,
        focused_disabled_shape: Optional[RoundedCornerShape] = None,
        pressed_selected_shape: Optional[RoundedCornerShape] = None,
    ) -> ListItemShape:
        return ListItemShape(StateStyle.build(
            shape, SHAPE_FALLBACKS,
            focused=focused_shape,
            pressed=pressed_shape,
            selected=selected_shape,
            disabled=disabled_shape,
            focused_selected=focused_selected_shape,
            focused_disabled=focused_disabled_shape,
            pressed_selected=pressed_selected_shape,
        ))

    @staticmethod
    def colors(
        container_color: str = TRANSPARENT,
        content_color: Optional[str] = None,
        focused_container_color: Optional[str] = None,
        focused_content_color: Optional[str] = None,
        pressed_container_color: Optional[str] = None,
        pressed_content_color: Optional[str] = None,
        selected_container_color: Optional[str] = None,
        selected_content_color: Optional[str] = None,
        disabled_container_color: str = TRANSPARENT,
        disabled_content_color: Optional[str] = None,
        focused_selected_container_color: Optional[str] = None,
        focused_selected_content_color: Optional[str] = None,
        pressed_selected_container_color: Optional[str] = None,
        pressed_selected_content_color: Optional[str] = None,
        scheme: ColorScheme = DEFAULT_SCHEME,
    ) -> ListItemColors:
        """
        Container and content colours per state.

        Unset focused/pressed content colours are derived from the focused
        container colour through `content_color_for`.
        """
        focused_container = focused_container_color or scheme.inverse_surface
        derived_content = content_color_for(focused_container, scheme)

        container = StateStyle.build(
            container_color, COLOR_FALLBACKS,
            focused=focused_container,
            pressed=pressed_container_color,
            selected=selected_container_color or with_alpha(scheme.secondary_container, 0.4),
            disabled=disabled_container_color,
            focused_selected=focused_selected_container_color,
            pressed_selected=pressed_selected_container_color,
        )
        content = StateStyle.build(
            content_color or scheme.on_surface, COLOR_FALLBACKS,
            focused=focused_content_color or derived_content,
            pressed=pressed_content_color or derived_content,
            selected=selected_content_color or scheme.on_secondary_container,
            disabled=disabled_content_color or scheme.on_surface,
            focused_selected=focused_selected_content_color,
            pressed_selected=pressed_selected_content_color,
        )
        return ListItemColors(container=container, content=content)

    @staticmethod
    def scale(
        scale: float = 1.0,
        focused_scale: Optional[float] = 1.05,
        pressed_scale: Optional[float] = None,
        selected_scale: Optional[float] = None,
        disabled_scale: Optional[float] = None,
        focused_selected_scale: Optional[float] = None,
        focused_disabled_scale: Optional[float] = None,
        pressed_selected_scale: Optional[float] = None,
    ) -> ListItemScale:
        values = (scale, focused_scale, pressed_scale, selected_scale, disabled_scale,
                  focused_selected_scale, focused_disabled_scale, pressed_selected_scale)
        if any(v is not None and v < 0 for v in values):
            raise ValueError("Scale values must be >= 0")
        return ListItemScale(StateStyle.build(
            scale, SCALE_FALLBACKS,
            focused=focused_scale,
            pressed=pressed_scale,
            selected=selected_scale,
            disabled=disabled_scale,
            focused_selected=focused_selected_scale,
            focused_disabled=focused_disabled_scale,
            pressed_selected=pressed_selected_scale,
        ))

    @staticmethod
    def border(
        border: Border = NO_BORDER,
        focused_border: Optional[Border] = None,
        pressed_border: Optional[Border] = None,
        selected_border: Optional[Border] = None,
        disabled_border: Optional[Border] = None,
        focused_selected_border: Optional[Border] = None,
        focused_disabled_border: Optional[Border] = None,
        pressed_selected_border: Optional[Border] = None,
        emphasis_focused_disabled: bool = True,
        scheme: ColorScheme = DEFAULT_SCHEME,
    ) -> ListItemBorder:
        """
        Borders per state.

        With *emphasis_focused_disabled* an unset focused-disabled border is the
        toolkit's `emphasis_border`; without it, it borrows the disabled border.
        """
        if focused_disabled_border is None and emphasis_focused_disabled:
            focused_disabled_border = ListItemDefaults.emphasis_border(scheme)
        return ListItemBorder(StateStyle.build(
            border, BORDER_FALLBACKS,
            focused=focused_border,
            pressed=pressed_border,
            selected=selected_border,
            disabled=disabled_border,
            focused_selected=focused_selected_border,
            focused_disabled=focused_disabled_border,
            pressed_selected=pressed_selected_border,
        ))

    @staticmethod
    def glow(
        glow: Glow = NO_GLOW,
        focused_glow: Optional[Glow] = None,
        pressed_glow: Optional[Glow] = None,
        selected_glow: Optional[Glow] = None,
        focused_selected_glow: Optional[Glow] = None,
        pressed_selected_glow: Optional[Glow] = None,
    ) -> ListItemGlow:
        return ListItemGlow(StateStyle.build(
            glow, GLOW_FALLBACKS,
            focused=focused_glow,
            pressed=pressed_glow,
            selected=selected_glow,
            focused_selected=focused_selected_glow,
            pressed_selected=pressed_selected_glow,
        ))

    @staticmethod
    def style(
        shape: Optional[ListItemShape] = None,
        colors: Optional[ListItemColors] = None,
        scale: Optional[ListItemScale] = None,
        border: Optional[ListItemBorder] = None,
        glow: Optional[ListItemGlow] = None,
    ) -> ListItemStyle:
        return ListItemStyle(
            shape=shape or ListItemDefaults.shape(),
            colors=colors or ListItemDefaults.colors(),
            scale=scale or ListItemDefaults.scale(),
            border=border or ListItemDefaults.border(),
            glow=glow or ListItemDefaults.glow(),
        )
