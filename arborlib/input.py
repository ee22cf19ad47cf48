"""Keyboard and mouse input state and the hotkeys derived from it."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields

__all__ = [
    "InputEvent",
    "Input",
    "Hotkeys",
    "orthographic_inputs",
    "bind_hotkeys_to_input",
    "reset_input_for_frame_start",
]


@dataclass
class InputEvent:
    """``clicked`` is true on the frame a key goes down; ``pressed`` while held."""

    clicked: bool = False
    pressed: bool = False


def _event() -> InputEvent:
    return field(default_factory=InputEvent)


@dataclass
class Input:
    escape: InputEvent = _event()

    enter: InputEvent = _event()
    space: InputEvent = _event()
    shift: InputEvent = _event()
    ctrl: InputEvent = _event()
    alt: InputEvent = _event()

    f12: InputEvent = _event()
    f11: InputEvent = _event()
    f10: InputEvent = _event()
    f9: InputEvent = _event()
    f8: InputEvent = _event()
    f7: InputEvent = _event()
    f6: InputEvent = _event()
    f5: InputEvent = _event()
    f4: InputEvent = _event()
    f3: InputEvent = _event()
    f2: InputEvent = _event()
    f1: InputEvent = _event()

    rmb: InputEvent = _event()
    lmb: InputEvent = _event()
    mmb: InputEvent = _event()

    q: InputEvent = _event()
    w: InputEvent = _event()
    e: InputEvent = _event()
    r: InputEvent = _event()
    t: InputEvent = _event()
    y: InputEvent = _event()
    u: InputEvent = _event()
    i: InputEvent = _event()
    o: InputEvent = _event()
    p: InputEvent = _event()

    a: InputEvent = _event()
    s: InputEvent = _event()
    d: InputEvent = _event()
    f: InputEvent = _event()
    g: InputEvent = _event()
    h: InputEvent = _event()
    j: InputEvent = _event()
    k: InputEvent = _event()
    l: InputEvent = _event()  # noqa: E741

    z: InputEvent = _event()
    x: InputEvent = _event()
    c: InputEvent = _event()
    v: InputEvent = _event()
    b: InputEvent = _event()
    n: InputEvent = _event()
    m: InputEvent = _event()

    mouse_wheel_delta: int = 0

    def clear_clicked_flags(self) -> None:
        """Reset every event's ``clicked`` flag, leaving ``pressed`` alone."""
        for member in fields(self):
            value = getattr(self, member.name)
            if isinstance(value, InputEvent):
                value.clicked = False


@dataclass
class Hotkeys:
    debug_toggle_menu: bool = False
    debug_toggle_profiling: bool = False

    debug_triangulate_increment: bool = False
    debug_triangulate_decrement: bool = False

    debug_pick_chunks_all: bool = False
    debug_pick_chunks_terrain: bool = False
    debug_pick_chunks_voxel: bool = False

    debug_action_compute_standing_spot: bool = False

    debug_redraw_every_push: bool = False
    debug_toggle_looped_game_playback: bool = False
    debug_toggle_triggered_runtime_break: bool = False

    debug_pause: bool = False

    left: bool = False
    right: bool = False
    forward: bool = False
    backward: bool = False

    player_fire: bool = False
    player_proton: bool = False
    player_jump: bool = False
    player_spawn: bool = False


def _clear_hotkeys(hotkeys: Hotkeys) -> None:
    for member in fields(hotkeys):
        setattr(hotkeys, member.name, False)


def orthographic_inputs(hotkeys: Hotkeys) -> tuple[float, float, float]:
    """Unit movement direction in the x/y plane, or zero when keys cancel."""
    x = float(hotkeys.right) - float(hotkeys.left)
    y = float(hotkeys.forward) - float(hotkeys.backward)
    length = math.hypot(x, y)
    if length == 0.0:
        return (0.0, 0.0, 0.0)
    return (x / length, y / length, 0.0)


def bind_hotkeys_to_input(
    hotkeys: Hotkeys, input_state: Input, internal: bool = True
) -> None:
    """Derive hotkeys from the current input; debug keys only when ``internal``."""
    if internal:
        hotkeys.debug_pause = input_state.f12.pressed
        hotkeys.debug_toggle_looped_game_playback = input_state.f11.clicked

        if input_state.f1.clicked:
            hotkeys.debug_toggle_menu = True
        if input_state.f2.clicked:
            hotkeys.debug_toggle_profiling = True

        if input_state.f5.pressed:
            hotkeys.debug_pick_chunks_all = True
        if input_state.f6.pressed:
            hotkeys.debug_pick_chunks_terrain = True
        if input_state.f7.pressed:
            hotkeys.debug_pick_chunks_voxel = True

        if input_state.f9.pressed:
            hotkeys.debug_action_compute_standing_spot = True

    hotkeys.left = input_state.a.pressed
    hotkeys.right = input_state.d.pressed
    hotkeys.forward = input_state.w.pressed
    hotkeys.backward = input_state.s.pressed

    hotkeys.player_jump = input_state.space.clicked
    hotkeys.player_spawn = input_state.enter.clicked


def reset_input_for_frame_start(input_state: Input, hotkeys: Hotkeys) -> None:
    """Clear per-frame state: wheel delta, click flags and all hotkeys."""
    input_state.mouse_wheel_delta = 0
    input_state.clear_clicked_flags()
    _clear_hotkeys(hotkeys)