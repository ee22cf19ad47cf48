import math
from dataclasses import fields

import pytest

from arborlib.input import (
    Hotkeys,
    Input,
    InputEvent,
    bind_hotkeys_to_input,
    orthographic_inputs,
    reset_input_for_frame_start,
)


def test_clear_clicked_flags_keeps_pressed():
    state = Input()
    state.space = InputEvent(clicked=True, pressed=True)
    state.lmb = InputEvent(clicked=True, pressed=False)
    state.clear_clicked_flags()
    assert state.space == InputEvent(clicked=False, pressed=True)
    assert state.lmb == InputEvent(clicked=False, pressed=False)


def test_input_events_are_independent():
    first, second = Input(), Input()
    first.a.pressed = True
    assert second.a.pressed is False


def test_orthographic_zero_when_idle_or_cancelled():
    assert orthographic_inputs(Hotkeys()) == (0.0, 0.0, 0.0)
    assert orthographic_inputs(Hotkeys(left=True, right=True)) == (0.0, 0.0, 0.0)


@pytest.mark.parametrize(
    "keys, expected",
    [
        ({"forward": True}, (0.0, 1.0, 0.0)),
        ({"backward": True}, (0.0, -1.0, 0.0)),
        ({"right": True}, (1.0, 0.0, 0.0)),
        ({"left": True}, (-1.0, 0.0, 0.0)),
    ],
)
def test_orthographic_axes(keys, expected):
    assert orthographic_inputs(Hotkeys(**keys)) == expected


def test_orthographic_diagonal_is_unit_length():
    x, y, z = orthographic_inputs(Hotkeys(forward=True, right=True))
    assert math.isclose(math.hypot(x, y, z), 1.0)
    assert math.isclose(x, y)


def test_bind_movement_and_actions():
    state = Input()
    state.w.pressed = True
    state.a.pressed = True
    state.space.clicked = True
    hotkeys = Hotkeys()
    bind_hotkeys_to_input(hotkeys, state)
    assert hotkeys.forward and hotkeys.left and hotkeys.player_jump
    assert not hotkeys.backward and not hotkeys.right and not hotkeys.player_spawn


def test_bind_debug_keys_only_when_internal():
    state = Input()
    state.f1.clicked = True
    state.f5.pressed = True
    state.f12.pressed = True

    external = Hotkeys()
    bind_hotkeys_to_input(external, state, internal=False)
    assert not external.debug_toggle_menu
    assert not external.debug_pick_chunks_all
    assert not external.debug_pause

    internal = Hotkeys()
    bind_hotkeys_to_input(internal, state, internal=True)
    assert internal.debug_toggle_menu
    assert internal.debug_pick_chunks_all
    assert internal.debug_pause


def test_reset_for_frame_start():
    state = Input(mouse_wheel_delta=3)
    state.enter = InputEvent(clicked=True, pressed=True)
    hotkeys = Hotkeys(left=True, debug_pause=True)
    reset_input_for_frame_start(state, hotkeys)
    assert state.mouse_wheel_delta == 0
    assert state.enter == InputEvent(clicked=False, pressed=True)
    assert all(getattr(hotkeys, f.name) is False for f in fields(hotkeys))