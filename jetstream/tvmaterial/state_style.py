"""
tvmaterial.state_style
~~~~~~~~~~~~~~~~~~~~~~
One visual property configured per interaction state.

A `StateStyle` is a base value, the explicit per-state overrides, and a
fallback table saying which state an unset state borrows from. States missing
from the table borrow from ``DEFAULT`` (the base value).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Generic, Mapping, Optional, TypeVar

from jetstream.tvmaterial.interaction import InteractionState as S

T = TypeVar("T")

Fallbacks = Mapping[S, S]

# ── per-property fallback tables ────────────────────────────────────────────
SHAPE_FALLBACKS: Fallbacks = {
    S.FOCUSED_DISABLED: S.DISABLED,
}

SCALE_FALLBACKS: Fallbacks = {
    S.FOCUSED_SELECTED: S.FOCUSED,
    S.FOCUSED_DISABLED: S.DISABLED,
}

BORDER_FALLBACKS: Fallbacks = {
    S.PRESSED:          S.FOCUSED,
    S.FOCUSED_SELECTED: S.FOCUSED,
    S.FOCUSED_DISABLED: S.DISABLED,
}

# glow has no disabled variants: disabled states draw the base glow
GLOW_FALLBACKS: Fallbacks = {
    S.FOCUSED_SELECTED: S.FOCUSED,
}

COLOR_FALLBACKS: Fallbacks = {
    S.PRESSED:          S.FOCUSED,
    S.FOCUSED_SELECTED: S.FOCUSED,
    S.PRESSED_SELECTED: S.PRESSED,
    S.FOCUSED_DISABLED: S.DISABLED,
}


@dataclass(frozen=True, eq=False)
class StateStyle(Generic[T]):
    base: T
    overrides: Mapping[S, T] = field(default_factory=dict)
    fallbacks: Fallbacks = field(default_factory=dict)

    @classmethod
    def build(cls, base: T, fallbacks: Fallbacks, **overrides: Optional[T]) -> "StateStyle[T]":
        """Keyword form: ``build(base, table, focused=x, pressed=None, ...)``.

        ``None`` means "not set"; unknown state names raise ``ValueError``.
        """
        table: dict[S, T] = {}
        for name, value in overrides.items():
            try:
                state = S(name)
            except ValueError:
                raise ValueError(f"Unknown interaction state: {name}") from None
            if value is not None:
                table[state] = value
        return cls(base=base, overrides=table, fallbacks=fallbacks)

    def resolve(self, state: S) -> T:
        """Value drawn in *state*: override, else the fallback state's value."""
        seen: set[S] = set()
        while state is not S.DEFAULT and state not in seen:
            if state in self.overrides:
                return self.overrides[state]
            seen.add(state)
            state = self.fallbacks.get(state, S.DEFAULT)
        return self.overrides.get(S.DEFAULT, self.base)

    def with_override(self, state: S, value: T) -> "StateStyle[T]":
        table = dict(self.overrides)
        table[state] = value
        return StateStyle(base=self.base, overrides=table, fallbacks=self.fallbacks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StateStyle):
            return NotImplemented
        return all(self.resolve(s) == other.resolve(s) for s in S)

    def __hash__(self) -> int:
        return hash(tuple(self.resolve(s) for s in S))
