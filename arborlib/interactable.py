"""Rectangular UI interactables and hover, click and press detection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, Tuple, Union

from arborlib.input import Input

__all__ = [
    "Rect2",
    "Interactable",
    "InteractableHandle",
    "UiState",
    "hover",
    "clicked",
    "pressed",
]

Vec2 = Tuple[float, float]


@dataclass(frozen=True)
class Rect2:
    """An axis-aligned rectangle from ``min`` (inclusive) to ``max`` (exclusive)."""

    min: Vec2
    max: Vec2

    @classmethod
    def flood(cls, value: float) -> "Rect2":
        """A degenerate rectangle with both corners at ``(value, value)``."""
        return cls((value, value), (value, value))

    def contains(self, point: Vec2) -> bool:
        """Whether ``point`` lies inside the half-open rectangle."""
        return all(lo <= p < hi for lo, p, hi in zip(self.min, point, self.max))


class _Window(Protocol):
    bounds: Rect2


@dataclass
class Interactable:
    """A clickable region identified by ``id``, optionally inside a window."""

    id: int
    min_p: Vec2
    max_p: Vec2
    window: Optional[_Window] = None

    @classmethod
    def from_rect(
        cls, rect: Rect2, id: int, window: Optional[_Window] = None
    ) -> "Interactable":
        return cls(id, rect.min, rect.max, window)

    @property
    def rect(self) -> Rect2:
        return Rect2(self.min_p, self.max_p)


@dataclass(frozen=True)
class InteractableHandle:
    """Refers to an interactable by id, for checking last frame's results."""

    id: int


@dataclass
class UiState:
    """Mouse and interaction state shared by every interactable in a frame."""

    mouse_p: Vec2 = (0.0, 0.0)
    input: Input = field(default_factory=Input)
    highest_window: Optional[_Window] = None
    hover_interaction_id: int = 0
    clicked_interaction_id: int = 0
    pressed_interaction_id: int = 0


Target = Union[Interactable, InteractableHandle]


def hover(group: UiState, interaction: Target) -> bool:
    """Whether the mouse is over ``interaction`` in the topmost window."""
    if isinstance(interaction, InteractableHandle):
        return group.hover_interaction_id == interaction.id
    result = group.highest_window is interaction.window and interaction.rect.contains(
        group.mouse_p
    )
    if interaction.window is not None:
        result = result and interaction.window.bounds.contains(group.mouse_p)
    return result


def clicked(group: UiState, interaction: Target) -> bool:
    """Whether ``interaction`` was clicked; a click claims the pressed slot."""
    if isinstance(interaction, InteractableHandle):
        return group.clicked_interaction_id == interaction.id
    button_clicked = group.input.lmb.clicked or group.input.rmb.clicked
    if not group.pressed_interaction_id and button_clicked and hover(group, interaction):
        group.pressed_interaction_id = interaction.id
        return True
    return False


def pressed(group: UiState, interaction: Target) -> bool:
    """Whether ``interaction`` is held down, claiming it if nothing else is."""
    if isinstance(interaction, InteractableHandle):
        return group.pressed_interaction_id == interaction.id
    current = group.pressed_interaction_id
    button_down = group.input.lmb.pressed or group.input.rmb.pressed
    if button_down and current == interaction.id:
        return True
    if button_down and not current and hover(group, interaction):
        group.pressed_interaction_id = interaction.id
        return True
    return False