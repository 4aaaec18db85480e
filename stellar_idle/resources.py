"""The resources a sector produces."""

from __future__ import annotations

from enum import Enum


class Resource(Enum):
    RESEARCH = "RESEARCH"
    DRONES = "DRONES"
    METALS = "METALS"
    POWER = "POWER"
    PRESTIGE = "PRESTIGE"

    def description(self) -> str:
        """Player-facing explanation of the resource."""
        return _DESCRIPTIONS[self]

    def __str__(self) -> str:
        return self.value


_DESCRIPTIONS = {
    Resource.RESEARCH: "RESEARCH. Scientific data about the Exoplanet.",
    Resource.DRONES: "DRONES. Autonomous workers assigned to gather resources.",
    Resource.METALS: "METALS. Crafting components for advanced tech.",
    Resource.POWER: "POWER. Energy for amplifying other systems.",
    Resource.PRESTIGE: "PRESTIGE. Used to upgrade the autonomous probe.",
}