"""Simulation core of a space-exploration idle game: resources, upgrades, events, drones and scenery."""

__version__ = "0.1.0"