import pytest

from jetstream.tvmaterial import (
    Border, DEFAULT_SCHEME, Glow, InteractionState as S, ListItemDefaults,
    RoundedCornerShape, StateStyle, NO_BORDER, NO_GLOW, content_color_for, with_alpha,
)
from jetstream.tvmaterial.state_style import (
    BORDER_FALLBACKS, COLOR_FALLBACKS, GLOW_FALLBACKS, SCALE_FALLBACKS, SHAPE_FALLBACKS,
)


# ── StateStyle ──────────────────────────────────────────────────────────────
def test_unset_states_use_base():
    style = StateStyle.build("base", COLOR_FALLBACKS)
    assert all(style.resolve(s) == "base" for s in S)


def test_fallback_chain_is_followed():
    style = StateStyle.build("base", COLOR_FALLBACKS, focused="f", pressed=None)
    assert style.resolve(S.PRESSED) == "f"
    assert style.resolve(S.FOCUSED_SELECTED) == "f"
    # pressed_selected → pressed → focused
    assert style.resolve(S.PRESSED_SELECTED) == "f"


def test_explicit_override_wins_over_fallback():
    style = StateStyle.build("base", COLOR_FALLBACKS, focused="f", pressed="p")
    assert style.resolve(S.PRESSED) == "p"
    assert style.resolve(S.PRESSED_SELECTED) == "p"


def test_unknown_state_name_rejected():
    with pytest.raises(ValueError):
        StateStyle.build(1.0, SCALE_FALLBACKS, hovered=1.2)


def test_with_override_returns_new_style():
    style = StateStyle.build(1.0, SCALE_FALLBACKS)
    bigger = style.with_override(S.FOCUSED, 1.2)
    assert style.resolve(S.FOCUSED) == 1.0
    assert bigger.resolve(S.FOCUSED) == 1.2


def test_equality_compares_resolved_values():
    a = StateStyle.build(1.0, SCALE_FALLBACKS, focused=1.1)
    b = StateStyle.build(1.0, SCALE_FALLBACKS, focused=1.1, focused_selected=1.1)
    assert a == b
    assert a != StateStyle.build(1.0, SCALE_FALLBACKS, focused=1.2)


# ── per-property chains ─────────────────────────────────────────────────────
def test_shape_focused_disabled_uses_disabled():
    d = RoundedCornerShape(2)
    shape = ListItemDefaults.shape(disabled_shape=d)
    assert shape.resolve(S.FOCUSED_DISABLED) == d
    assert shape.resolve(S.PRESSED) == ListItemDefaults.SHAPE


def test_scale_chain():
    scale = ListItemDefaults.scale(disabled_scale=0.9)
    assert scale.resolve(S.FOCUSED) == 1.05
    assert scale.resolve(S.FOCUSED_SELECTED) == 1.05
    assert scale.resolve(S.FOCUSED_DISABLED) == 0.9
    assert scale.resolve(S.PRESSED) == 1.0


def test_negative_scale_rejected():
    with pytest.raises(ValueError):
        ListItemDefaults.scale(pressed_scale=-0.1)


def test_border_pressed_and_focused_selected_use_focused():
    focus = Border(width=3, color="#FFFFFF", radius=8)
    border = ListItemDefaults.border(focused_border=focus)
    assert border.resolve(S.PRESSED) == focus
    assert border.resolve(S.FOCUSED_SELECTED) == focus
    assert border.resolve(S.SELECTED) == NO_BORDER


def test_border_focused_disabled_emphasis():
    border = ListItemDefaults.border()
    assert border.resolve(S.FOCUSED_DISABLED) == ListItemDefaults.emphasis_border()
    assert border.resolve(S.FOCUSED_DISABLED).width == 2


def test_border_focused_disabled_without_emphasis_uses_disabled():
    d = Border(width=1, color="#000000")
    border = ListItemDefaults.border(disabled_border=d, emphasis_focused_disabled=False)
    assert border.resolve(S.FOCUSED_DISABLED) == d


def test_glow_has_no_disabled_variant():
    g = Glow("#A8C8FF", 8)
    glow = ListItemDefaults.glow(focused_glow=g)
    assert glow.resolve(S.FOCUSED_SELECTED) == g
    assert glow.resolve(S.DISABLED) == NO_GLOW
    assert glow.resolve(S.FOCUSED_DISABLED) == NO_GLOW
    assert S.DISABLED not in GLOW_FALLBACKS and S.FOCUSED_DISABLED not in GLOW_FALLBACKS


def test_fallback_tables_only_point_at_real_states():
    for table in (SHAPE_FALLBACKS, SCALE_FALLBACKS, BORDER_FALLBACKS, GLOW_FALLBACKS, COLOR_FALLBACKS):
        assert all(isinstance(k, S) and isinstance(v, S) for k, v in table.items())


# ── colours ─────────────────────────────────────────────────────────────────
def test_default_colors():
    scheme = DEFAULT_SCHEME
    colors = ListItemDefaults.colors()
    assert colors.container.resolve(S.FOCUSED) == scheme.inverse_surface
    assert colors.content.resolve(S.FOCUSED) == scheme.inverse_on_surface
    assert colors.content.resolve(S.PRESSED) == scheme.inverse_on_surface
    assert colors.container.resolve(S.SELECTED) == with_alpha(scheme.secondary_container, 0.4)
    assert colors.content.resolve(S.SELECTED) == scheme.on_secondary_container
    assert colors.content.resolve(S.DEFAULT) == scheme.on_surface


def test_focused_disabled_color_equals_disabled_override():
    colors = ListItemDefaults.colors(disabled_container_color="#101010")
    assert colors.container.resolve(S.FOCUSED_DISABLED) == "#101010"


def test_content_color_follows_custom_focused_container():
    scheme = DEFAULT_SCHEME
    colors = ListItemDefaults.colors(focused_container_color=scheme.primary)
    assert colors.content.resolve(S.FOCUSED) == scheme.on_primary


def test_content_color_for_unknown_color_is_on_surface():
    assert content_color_for("#123456") == DEFAULT_SCHEME.on_surface
    assert content_color_for(DEFAULT_SCHEME.inverse_surface.lower()) == DEFAULT_SCHEME.inverse_on_surface


def test_with_alpha_keeps_rgb():
    assert with_alpha("#3D4758", 0.0).lower() == "#003d4758"
    assert with_alpha("#3D4758", 1.0).lower() == "#ff3d4758"


def test_resolved_stylesheet_mentions_border_and_color():
    style = ListItemDefaults.style(
        border=ListItemDefaults.border(focused_border=Border(width=3, color="#FFFFFF", radius=8)),
    )
    css = style.stylesheet(S.FOCUSED, "QFrame#Card")
    assert "QFrame#Card {" in css
    assert "border: 3px solid rgba(255, 255, 255, 255);" in css
    assert "QFrame#Card QLabel" in css
    assert "border: none;" in style.stylesheet(S.DEFAULT)


def test_resolve_flags_goes_through_state_resolution():
    style = ListItemDefaults.style()
    assert style.resolve_flags(focused=True, selected=True) == style.resolve(S.FOCUSED_SELECTED)
    assert style.resolve_flags(enabled=False) == style.resolve(S.DISABLED)


def test_equal_styles_hash_equally():
    a = StateStyle.build(1.0, SCALE_FALLBACKS, focused=1.1)
    b = StateStyle.build(1.0, SCALE_FALLBACKS, focused=1.1, focused_selected=1.1)
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert hash(ListItemDefaults.style()) == hash(ListItemDefaults.style())
