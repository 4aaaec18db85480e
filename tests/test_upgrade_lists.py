from stellar_idle.btn import Bounds
from stellar_idle.resources import Resource
from stellar_idle.upgrade import CostFormula, Upgrade
from stellar_idle.upgrade_lists import (
    complex_upgrades,
    depot_upgrades,
    exoplanet_upgrades,
    gate_upgrades,
    mines_upgrades,
    power_upgrades,
    probe_upgrades,
    unassign,
)


def test_unassign_is_free_and_maxed():
    upgrade = unassign()
    assert upgrade.name == "UNASSIGN"
    assert upgrade.cost == []
    assert upgrade.max_level == 0
    assert upgrade.can_afford({Resource.DRONES: 5}) is False


def test_unlock_indices_point_into_same_list():
    catalogues = [
        exoplanet_upgrades(),
        depot_upgrades(),
        mines_upgrades(),
        power_upgrades(),
        gate_upgrades(),
        complex_upgrades(),
        probe_upgrades(),
    ]
    for upgrades in catalogues:
        for upgrade in upgrades:
            assert all(0 <= i < len(upgrades) for i in upgrade.unlocks)


def test_fresh_lists_are_independent():
    first = [
        exoplanet_upgrades(),
        depot_upgrades(),
        mines_upgrades(),
        power_upgrades(),
        gate_upgrades(),
        complex_upgrades(),
        probe_upgrades(),
    ]
    marker = (Resource.PRESTIGE, 987_654)
    for upgrades in first:
        upgrades[0].level = 1
        upgrades[0].cost.append(marker)
    second = [
        exoplanet_upgrades(),
        depot_upgrades(),
        mines_upgrades(),
        power_upgrades(),
        gate_upgrades(),
        complex_upgrades(),
        probe_upgrades(),
    ]
    for upgrades in second:
        assert upgrades[0].level == 0
        assert marker not in upgrades[0].cost


def test_every_upgrade_starts_at_level_zero():
    everything = (
        exoplanet_upgrades()
        + depot_upgrades()
        + mines_upgrades()
        + power_upgrades()
        + gate_upgrades()
        + complex_upgrades()
        + probe_upgrades()
    )
    assert [u.level for u in everything] == [0] * len(everything)


def test_exoplanet_catalogue_values():
    upgrades = exoplanet_upgrades()
    assert [u.name for u in upgrades] == [
        "FIELD SCANNER",
        "DEPLOY SURVEY DRONE",
        "ADV. SENSORS",
        "BIOSCANNERS",
    ]
    scanner = upgrades[0]
    assert scanner.cost == [(Resource.RESEARCH, 15)]
    assert scanner.max_level == 4
    assert scanner.cost_formula is CostFormula.DOUBLE
    assert scanner.label() == "FIELD SCANNER LVL 1"
    assert upgrades[1].unlocks == [2]


def test_fabricator_keeps_distinct_base_cost():
    fab = depot_upgrades()[2]
    assert fab.name == "CONSTRUCT FABRICATOR"
    assert fab.cost == [(Resource.RESEARCH, 4800), (Resource.METALS, 2400)]
    assert fab.base_cost == [(Resource.RESEARCH, 3800), (Resource.METALS, 1200)]


def test_drone_shipment_uses_exponential_costs():
    shipment = depot_upgrades()[1]
    assert shipment.cost_formula is CostFormula.EXPONENTIAL
    assert shipment.cost == [(Resource.RESEARCH, 120)]
    assert shipment.next_level() is False
    assert shipment.cost[0][1] >= 120


def test_gate_construct_costs_three_resources():
    gate = gate_upgrades()
    assert gate[0].cost == [
        (Resource.RESEARCH, 160_000),
        (Resource.METALS, 80_000),
        (Resource.POWER, 40_000),
    ]
    assert gate[1].name == "JUMP TO NEXT SECTOR"
    assert gate[1].cost == []
    assert gate[1].max_level == 10_000_000


def test_power_construct_unlocks_rest():
    power = power_upgrades()
    assert power[0].unlocks == [1, 2, 3]
    assert power[0].cost == [(Resource.RESEARCH, 3200), (Resource.METALS, 1200)]


def test_mines_construct_unlocks_deploy_and_drill():
    mines = mines_upgrades()
    assert mines[0].unlocks == [1, 2]
    assert [mines[i].name for i in mines[0].unlocks] == ["DEPLOY MINING DRONE", "DRILL AUGMENT"]


def test_deploy_upgrades_cost_one_drone():
    everything = (
        exoplanet_upgrades()
        + depot_upgrades()
        + mines_upgrades()
        + power_upgrades()
        + gate_upgrades()
        + complex_upgrades()
        + probe_upgrades()
    )
    deploys = [u for u in everything if u.name.startswith("DEPLOY")]
    assert len(deploys) == 5
    for upgrade in deploys:
        assert upgrade.cost == [(Resource.DRONES, 1)]
        assert upgrade.cost_formula is CostFormula.NONE


def test_probe_base_costs_prestige():
    probe = probe_upgrades()
    assert probe[0].cost == [(Resource.PRESTIGE, 1)]
    assert probe[0].can_afford({Resource.PRESTIGE: 1}) is True
    assert probe[0].can_afford({Resource.PRESTIGE: 0}) is False


def test_complex_catalogue():
    complex_list = complex_upgrades()
    assert complex_list[0].cost == [(Resource.RESEARCH, 6400), (Resource.METALS, 800)]
    assert complex_list[1].name == "DEPLOY RESEARCH DRONE"


def test_add_upgrade_from_catalogue_leaves_catalogue_untouched():
    catalogue = depot_upgrades()
    active: list[Upgrade] = []
    panel = Bounds(0, 0, 204, 86)
    Upgrade.add_upgrade(active, catalogue, 0, panel)
    Upgrade.add_upgrade(active, catalogue, 99, panel)
    assert [u.name for u in active] == ["CONSTRUCT"]
    active[0].next_level()
    assert catalogue[0].level == 0