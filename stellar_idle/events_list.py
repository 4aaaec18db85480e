"""The scripted cutscenes of a sector."""

from __future__ import annotations

from stellar_idle.events import Dialogue

Box = tuple[int, int, int, int]


def build_cutscenes(depot_box: Box, mines_box: Box, plant_box: Box, gate_box: Box) -> list[Dialogue]:
    """Build the cutscenes, given each station's (x, y, w, h) box."""
    dx, dy, dw, _ = depot_box
    mx, my, _, mh = mines_box
    px, py, pw, ph = plant_box
    gx, gy, gw, _ = gate_box
    gate_view = (gx + gw // 2, gy - 32)

    return [
        Dialogue(
            messages=[
                "Exoplanet detected!",
                "Sending autonomous research probe to Exoplanet...",
                "Scan the Exoplanet to gather scientific RESEARCH and report back.  ",
            ],
            camera_pos=[((320, 200), 0), ((320, 256), 2)],
            event_broadcast=0,
        ),
        Dialogue(
            messages=[
                "Significant RESEARCH gathered from research probe!",
                "Authorizing construction of DRONE DEPOT. ",
                "Establish a hub for additional autonomous workers and deploy them to gather RESEARCH.",
            ],
            camera_pos=[((320, 200), 0), ((dx + dw // 2, dy - 16), 1)],
            event_broadcast=1,
        ),
        Dialogue(
            messages=[
                "Automated RESEARCH production initiated.",
                "New scans revealed nearby mineral rich asteroid belt!",
                "Authorizing construction of ASTEROID MINES. ",
                "Gather METALS from the asteroids to build advanced tech.",
            ],
            camera_pos=[((320, 200), 0), ((mx - 16, my + mh // 2), 2)],
            event_broadcast=2,
        ),
        Dialogue(
            messages=[
                "Automated METALS production initiated.",
                "Further scans have revealed nearby nebula storm.",
                "Authorizing construction of POWER PLANT.",
                "Harvest POWER from the storm to amplify other stations.",
            ],
            camera_pos=[((64, 32), 0), ((px + pw // 2, py - 16), 2)],
            event_broadcast=2,
        ),
        Dialogue(
            messages=[
                "Automated POWER production initiated.",
                "Sector self-sufficiency achieved. Entering final stage of exoplanet observation.",
                "Authorizing construction of JUMPGATE.",
                "Use the JUMPGATE to leave this sector and start again in a new sector.",
            ],
            camera_pos=[((px + pw // 2, py + ph // 2), 0), (gate_view, 2)],
            event_broadcast=2,
        ),
        Dialogue(
            messages=[
                "Jumpgate initiated. Prepare for imminent jump.",
                "Good work, researcher! There's more work in the next sector.",
            ],
            camera_pos=[(gate_view, 0)],
            event_broadcast=0,
        ),
        Dialogue(
            messages=["Reset all your progress including Prestige?"],
            camera_pos=[((320, 240), 0)],
            event_broadcast=1,
            prompt=True,
        ),
        Dialogue(
            messages=["Earn Prestige and start over in a new sector?"],
            camera_pos=[((320, 240), 0)],
            event_broadcast=1,
            prompt=True,
        ),
        Dialogue(
            messages=["Another sector is waiting observation!", ""],
            camera_pos=[((320, 200), 0)],
            event_broadcast=1,
        ),
    ]