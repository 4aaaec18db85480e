"""Catalogues of the upgrades each station offers."""

from __future__ import annotations

from stellar_idle.resources import Resource
from stellar_idle.upgrade import CostFormula, Upgrade

R = Resource


def unassign() -> Upgrade:
    """The pseudo-upgrade that takes a drone back from a station."""
    return Upgrade(
        name="UNASSIGN",
        description="Unassign a DRONE from this station.",
        cost=[],
        max_level=0,
        base_cost=[],
    )


def _deploy(name: str, description: str) -> Upgrade:
    return Upgrade(
        name=name,
        description=description,
        cost=[(R.DRONES, 1)],
        max_level=100,
    )


def _leveled(name: str, description: str, cost: list[tuple[Resource, int]], max_level: int) -> Upgrade:
    return Upgrade(
        name=name,
        description=description,
        cost=list(cost),
        max_level=max_level,
        display_lvl=True,
        cost_formula=CostFormula.DOUBLE,
    )


def exoplanet_upgrades() -> list[Upgrade]:
    return [
        _leveled(
            "FIELD SCANNER",
            "Increase the amount of research gathered by pressing the Exoplanet by 1",
            [(R.RESEARCH, 15)],
            4,
        ),
        Upgrade(
            name="DEPLOY SURVEY DRONE",
            description="Assign a DRONE to gather RESEARCH",
            cost=[(R.DRONES, 1)],
            max_level=100,
            unlocks=[2],
        ),
        _leveled(
            "ADV. SENSORS",
            "Increase the amount of RESEARCH gathered by SURVEY DRONES by 16",
            [(R.METALS, 32)],
            100,
        ),
        _leveled(
            "BIOSCANNERS",
            "Increase the speed of SURVEY DRONES by 10%",
            [(R.POWER, 40)],
            100,
        ),
    ]


def depot_upgrades() -> list[Upgrade]:
    return [
        Upgrade(
            name="CONSTRUCT",
            description="Construct DRONE DEPOT.",
            cost=[(R.RESEARCH, 60)],
            max_level=1,
            unlocks=[1],
        ),
        Upgrade(
            name="DRONE SHIPMENT",
            description="Exchange RESEARCH for a DRONE",
            cost=[(R.RESEARCH, 120)],
            max_level=100,
            cost_formula=CostFormula.EXPONENTIAL,
        ),
        Upgrade(
            name="CONSTRUCT FABRICATOR",
            description="Construct FABRICATOR. Assign DRONES to convert METAL into DRONES",
            cost=[(R.RESEARCH, 4800), (R.METALS, 2400)],
            max_level=1,
            base_cost=[(R.RESEARCH, 3800), (R.METALS, 1200)],
        ),
        _deploy("DEPLOY MAKER DRONE", "Assign a DRONE to fabricate DRONES"),
        _leveled(
            "CARGO CAPACITY",
            "Increase the amount of METALS gathered by MAKER DRONES by 24",
            [(R.METALS, 860)],
            30,
        ),
        _leveled(
            "PLASMA TOOLS",
            "Increase the speed of MAKER DRONES by 20%",
            [(R.POWER, 240)],
            30,
        ),
    ]


def mines_upgrades() -> list[Upgrade]:
    return [
        Upgrade(
            name="CONSTRUCT",
            description="Construct ASTEROID MINES",
            cost=[(R.RESEARCH, 800)],
            max_level=1,
            unlocks=[1, 2],
        ),
        _deploy("DEPLOY MINING DRONE", "Assign a DRONE to gather METALS"),
        _leveled(
            "DRILL AUGMENT",
            "Increase the amount of METALS gathered by MINING DRONES by 18",
            [(R.METALS, 120)],
            20,
        ),
        _leveled(
            "ADV. THRUSTERS",
            "Increase the speed of MINING DRONES by 10%",
            [(R.POWER, 100)],
            20,
        ),
    ]


def power_upgrades() -> list[Upgrade]:
    return [
        Upgrade(
            name="CONSTRUCT",
            description="Construct POWER PLANT",
            cost=[(R.RESEARCH, 3200), (R.METALS, 1200)],
            max_level=1,
            unlocks=[1, 2, 3],
        ),
        _deploy("DEPLOY CONDUIT DRONE", "Assign a DRONE to gather POWER"),
        _leveled(
            "REFLECTOR CELLS",
            "Increase the amount of POWER gathered by CONDUIT DRONES by 12",
            [(R.METALS, 220)],
            100,
        ),
        _leveled(
            "ARC BATTERIES",
            "Increase the speed of CONDUIT DRONES by 10%",
            [(R.POWER, 350)],
            100,
        ),
    ]


def gate_upgrades() -> list[Upgrade]:
    return [
        Upgrade(
            name="CONSTRUCT",
            description="Construct JUMP GATE",
            cost=[(R.RESEARCH, 160_000), (R.METALS, 80_000), (R.POWER, 40_000)],
            max_level=1,
            unlocks=[1],
            base_cost=[(R.RESEARCH, 240_000), (R.METALS, 90_000), (R.POWER, 50_000)],
        ),
        Upgrade(
            name="JUMP TO NEXT SECTOR",
            description="Earn Prestige. Proceed to next sector and start again",
            cost=[],
            max_level=10_000_000,
            base_cost=[],
        ),
    ]


def complex_upgrades() -> list[Upgrade]:
    return [
        Upgrade(
            name="CONSTRUCT",
            description="Construct RESEARCH COMPLEX",
            cost=[(R.RESEARCH, 6400), (R.METALS, 800)],
            max_level=1,
            unlocks=[1],
            base_cost=[(R.RESEARCH, 0)],
        ),
        _deploy("DEPLOY RESEARCH DRONE", "Assign a DRONE to complete RESEARCH PROJECTS"),
    ]


def probe_upgrades() -> list[Upgrade]:
    return [
        Upgrade(
            name="BASE",
            description="Increase the BASE of all DRONES by 2x",
            cost=[(R.PRESTIGE, 1)],
            max_level=1,
            unlocks=[1],
            base_cost=[(R.RESEARCH, 0)],
        ),
        _deploy("EFFECIENCY", "Increase the EFF. of all DRONES by 2x"),
    ]