"""Rectangles, pointer state and clickable buttons."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, auto


@dataclass(frozen=True)
class Bounds:
    """An axis-aligned rectangle with integer position and size."""

    x: int
    y: int
    w: int
    h: int

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    @property
    def center_x(self) -> int:
        return self.x + self.w // 2

    @property
    def center_y(self) -> int:
        return self.y + self.h // 2

    def contains(self, point: tuple[float, float]) -> bool:
        """Whether the point lies inside; left/top edges inclusive, right/bottom exclusive."""
        px, py = point
        return self.x <= px < self.right and self.y <= py < self.bottom

    def inset(self, amount: int) -> Bounds:
        return Bounds(
            self.x + amount,
            self.y + amount,
            max(0, self.w - 2 * amount),
            max(0, self.h - 2 * amount),
        )

    def with_width(self, w: int) -> Bounds:
        return replace(self, w=w)

    def with_height(self, h: int) -> Bounds:
        return replace(self, h=h)

    def position(self, x: int, y: int) -> Bounds:
        return replace(self, x=x, y=y)

    def translate(self, dx: int, dy: int) -> Bounds:
        return replace(self, x=self.x + dx, y=self.y + dy)

    def translate_x(self, dx: int) -> Bounds:
        return replace(self, x=self.x + dx)

    def anchor_right(self, other: Bounds) -> Bounds:
        return replace(self, x=other.right - self.w)

    def anchor_bottom(self, other: Bounds) -> Bounds:
        return replace(self, y=other.bottom - self.h)

    def anchor_center_y(self, other: Bounds) -> Bounds:
        return replace(self, y=other.center_y - self.h // 2)


@dataclass
class Pointer:
    """A snapshot of pointer input for one frame."""

    world: tuple[float, float] = (0.0, 0.0)
    screen: tuple[float, float] = (0.0, 0.0)
    pressed: bool = False
    just_pressed: bool = False
    released: bool = False
    scroll: tuple[int, int] = (0, 0)

    def position(self, fixed: bool) -> tuple[float, float]:
        """Screen coordinates for fixed elements, world coordinates otherwise."""
        return self.screen if fixed else self.world


class BtnState(Enum):
    DISABLED = auto()
    NORMAL = auto()
    HOVERED = auto()
    PRESSED = auto()

    def colors(self, index: int) -> tuple[int, int, int]:
        """(fill, border, foreground) colours for the given palette."""
        palette = _PRIMARY if index == 0 else _SECONDARY
        return palette[self]


_PRIMARY = {
    BtnState.DISABLED: (0x9BADB7FF, 0x847E87FF, 0xFFFFFFFF),
    BtnState.NORMAL: (0x1F122BFF, 0x1F122BFF, 0xFFFFFFFF),
    BtnState.HOVERED: (0x847E87FF, 0x847E87FF, 0xFFFFFFFF),
    BtnState.PRESSED: (0x847E87FF, 0xFFFFFFFF, 0x9BADB7FF),
}

_SECONDARY = {
    BtnState.DISABLED: (0x1F122BFF, 0x1F122BFF, 0x847E87FF),
    BtnState.NORMAL: (0x1F122BFF, 0xFFFFFFFF, 0xFFFFFFFF),
    BtnState.HOVERED: (0xFFFFFFFF, 0x1F122BFF, 0x1F122BFF),
    BtnState.PRESSED: (0xFFFFFFFF, 0xFFFFFFFF, 0x1F122BFF),
}


@dataclass
class Btn:
    """A button drawn either as text or as a sprite named by ``string``."""

    string: str
    bounds: Bounds
    text: bool
    colors_index: int
    state: BtnState = BtnState.NORMAL
    interactable: bool = True
    clickable: bool = True
    fixed: bool = True
    font: str = field(default="medium")

    @classmethod
    def buy(cls) -> Btn:
        """The small '+' purchase button."""
        return cls("+", Bounds(0, 0, 0, 0), False, 1, interactable=False)

    def colors(self) -> tuple[int, int, int]:
        return self.state.colors(self.colors_index)

    def on_click(self, pointer: Pointer) -> bool:
        return (
            self.interactable
            and self.clickable
            and self.bounds.contains(pointer.position(self.fixed))
            and pointer.just_pressed
        )

    def update(self, pointer: Pointer) -> None:
        if not self.interactable:
            self.state = BtnState.DISABLED
            return
        inside = self.bounds.contains(pointer.position(self.fixed))
        if self.clickable and inside and pointer.pressed:
            self.state = BtnState.PRESSED
        elif inside:
            self.state = BtnState.HOVERED
        else:
            self.state = BtnState.NORMAL