"""
tvmaterial.interaction
~~~~~~~~~~~~~~~~~~~~~~
The eight interaction states a TV widget can be drawn in, and the mapping
from raw widget flags to one of them.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class InteractionState(str, Enum):
    DEFAULT          = "default"
    FOCUSED          = "focused"
    PRESSED          = "pressed"
    SELECTED         = "selected"
    DISABLED         = "disabled"
    FOCUSED_SELECTED = "focused_selected"
    FOCUSED_DISABLED = "focused_disabled"
    PRESSED_SELECTED = "pressed_selected"


def resolve_state(
    enabled: bool = True,
    focused: bool = False,
    pressed: bool = False,
    selected: bool = False,
) -> InteractionState:
    """Pick the interaction state for a combination of widget flags.

    Pressed wins over focused, selection combines with either. A disabled
    widget can still hold focus but is never pressed or selected.
    """
    if enabled:
        if selected and pressed:
            return InteractionState.PRESSED_SELECTED
        if selected and focused:
            return InteractionState.FOCUSED_SELECTED
        if selected:
            return InteractionState.SELECTED
        if pressed:
            return InteractionState.PRESSED
        if focused:
            return InteractionState.FOCUSED
        return InteractionState.DEFAULT
    if focused:
        return InteractionState.FOCUSED_DISABLED
    return InteractionState.DISABLED


@dataclass
class InteractionFlags:
    """Mutable flag holder kept by a widget; `state` is derived on demand."""
    enabled: bool = True
    focused: bool = False
    pressed: bool = False
    selected: bool = False

    @property
    def state(self) -> InteractionState:
        return resolve_state(self.enabled, self.focused, self.pressed, self.selected)
