import pytest

from jetstream.tvmaterial import InteractionFlags, InteractionState as S, resolve_state


@pytest.mark.parametrize(
    "flags, expected",
    [
        (dict(), S.DEFAULT),
        (dict(focused=True), S.FOCUSED),
        (dict(pressed=True), S.PRESSED),
        (dict(focused=True, pressed=True), S.PRESSED),
        (dict(selected=True), S.SELECTED),
        (dict(focused=True, selected=True), S.FOCUSED_SELECTED),
        (dict(pressed=True, selected=True), S.PRESSED_SELECTED),
        (dict(focused=True, pressed=True, selected=True), S.PRESSED_SELECTED),
        (dict(enabled=False), S.DISABLED),
        (dict(enabled=False, focused=True), S.FOCUSED_DISABLED),
        (dict(enabled=False, selected=True), S.DISABLED),
        (dict(enabled=False, focused=True, pressed=True), S.FOCUSED_DISABLED),
    ],
)
def test_resolve_state(flags, expected):
    assert resolve_state(**flags) is expected


def test_flags_state_tracks_mutation():
    flags = InteractionFlags()
    assert flags.state is S.DEFAULT
    flags.selected = True
    flags.focused = True
    assert flags.state is S.FOCUSED_SELECTED
    flags.enabled = False
    assert flags.state is S.FOCUSED_DISABLED


def test_state_values_are_stable_names():
    assert S("focused_selected") is S.FOCUSED_SELECTED
    assert len(S) == 8
