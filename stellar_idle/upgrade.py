"""Purchasable station upgrades and their cost growth."""

from __future__ import annotations

import copy
import struct
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union

from stellar_idle.btn import Bounds, Btn, BtnState, Pointer
from stellar_idle.resources import Resource

Cost = list[tuple[Resource, int]]
Holdings = Union[Mapping[Resource, int], Iterable[tuple[Resource, int]]]

_U64_MAX = 2**64 - 1


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class CostFormula(Enum):
    NONE = auto()
    DOUBLE = auto()
    EXPONENTIAL = auto()

    def calculate_cost(self, base_cost: Cost, n: int) -> Cost:
        """Cost at level ``n`` derived from the base cost."""
        if self is CostFormula.NONE:
            return list(base_cost)
        if self is CostFormula.DOUBLE:
            result = []
            for resource, amount in base_cost:
                product = amount * 2**n
                if product > _U64_MAX:
                    raise OverflowError(f"cost of {resource} at level {n} overflows")
                result.append((resource, product))
            return result
        factor = _f32(_f32(1.1) ** n)
        return [(resource, int(_f32(_f32(amount) * factor))) for resource, amount in base_cost]


def _pairs(resources: Holdings) -> list[tuple[Resource, int]]:
    if isinstance(resources, Mapping):
        return list(resources.items())
    return list(resources)


def _default_entry() -> Btn:
    return Btn("", Bounds(-320, -320, 0, 0), True, 0)


@dataclass
class Upgrade:
    name: str
    description: str
    cost: Cost
    max_level: int
    unlocks: list[int] = field(default_factory=list)
    level: int = 0
    display_lvl: bool = False
    cost_formula: CostFormula = CostFormula.NONE
    base_cost: Cost | None = None
    entry: Btn = field(default_factory=_default_entry)
    buy_button: Btn = field(default_factory=Btn.buy)
    hovered: bool = False

    def __post_init__(self) -> None:
        if self.base_cost is None:
            self.base_cost = list(self.cost)

    @staticmethod
    def add_upgrade(upgrades: list[Upgrade], catalogue: list[Upgrade], index: int, panel: Bounds) -> None:
        """Append a fresh copy of ``catalogue[index]``; out-of-range indices are ignored."""
        if 0 <= index < len(catalogue):
            upgrade = copy.deepcopy(catalogue[index])
            upgrade.init(panel, len(upgrades))
            upgrades.append(upgrade)

    def init(self, panel: Bounds, index: int) -> Upgrade:
        height = len(self.cost) * 20 if self.cost else 20
        self.entry.clickable = False
        self.entry.fixed = True
        self.entry.bounds = panel.inset(4).with_height(height)
        self.buy_button.interactable = False
        self.buy_button.bounds = self.buy_button.bounds.with_height(15).with_width(15)
        self.array(panel, index)
        return self

    def array(self, bounds: Bounds, index: int) -> None:
        """Place the entry as row ``index`` of the panel ``bounds``."""
        self.entry.bounds = self.entry.bounds.position(bounds.x + 4, 24 + bounds.y + index * 20)
        self.buy_button.bounds = (
            self.buy_button.bounds.anchor_right(self.entry.bounds)
            .translate_x(-64)
            .anchor_center_y(self.entry.bounds)
        )

    def can_afford(self, resources: Holdings) -> bool:
        if self.level >= self.max_level:
            return False
        held = _pairs(resources)
        for resource, amount in self.cost:
            matching = [have for kind, have in held if kind == resource]
            if not matching or any(have < amount for have in matching):
                return False
        return True

    def update(self, resources: Holdings, pointer: Pointer) -> None:
        self.entry.update(pointer)
        self.hovered = self.entry.state is BtnState.HOVERED
        self.buy_button.interactable = self.can_afford(resources)
        self.buy_button.update(pointer)

    def on_click(self, pointer: Pointer) -> bool:
        return self.buy_button.on_click(pointer)

    def next_level(self) -> bool:
        """Advance one level; return True once the upgrade is maxed out."""
        self.level += 1
        if self.level >= self.max_level:
            self.level = self.max_level
            self.buy_button.interactable = False
            return True
        self.cost = self.cost_formula.calculate_cost(list(self.base_cost or []), self.level)
        return False

    def label(self) -> str:
        if self.display_lvl:
            return f"{self.name} LVL {self.level + 1}"
        return self.name