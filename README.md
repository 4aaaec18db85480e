# stellar_idle

This package is the simulation core of a small space-exploration idle game. It
holds game state and the rules that change it. The caller supplies everything
that comes from outside the simulation: `Pointer`, `Gamepad` and `Camera` state,
a tick counter, a `random.Random` for the random parts, and the `(x, y, w, h)`
boxes of the stations. The package returns plain values, such as positions,
RGBA colours, labels and produced resources, which the caller can render or
apply.

## Modules

- `stellar_idle.noise`: `perlin_noise(x, y)` gives 2D Perlin noise scaled into 0..1.
- `stellar_idle.numbers`: `format_number(num)` returns values under 10,000 as plain numbers. Larger values get one decimal and a `K`, `M` or `B` suffix. Negative values raise `ValueError`.
- `stellar_idle.resources`: `Resource` is an enum with RESEARCH, DRONES, METALS, POWER and PRESTIGE. Each member has a `description()`.
- `stellar_idle.btn`:
  - `Bounds` is an immutable rectangle with layout helpers (`inset`, `with_width`, `position`, `anchor_right`, …).
  - `Pointer` is a per-frame snapshot of pointer input.
  - `Btn` is a button with `NORMAL`, `HOVERED`, `PRESSED` and `DISABLED` states and their colour palettes.
- `stellar_idle.camera_ctrl`: `CameraCtrl` pans the view from gamepad input and from pointer drags. Drag panning has damped momentum, and the position is clamped to 0..640 × 0..400. It also steps `Camera.zoom` with a cooldown.
- `stellar_idle.upgrade`:
  - `Upgrade` tracks levels, purchase checks (`can_afford`) and row placement in a panel.
  - `CostFormula` scales cost per level in one of three ways: `NONE`, `DOUBLE` or `EXPONENTIAL` (×1.1 per level).
- `stellar_idle.upgrade_lists`: fresh catalogues for each station: `exoplanet_upgrades()`, `depot_upgrades()`, `mines_upgrades()`, `power_upgrades()`, `gate_upgrades()`, `complex_upgrades()`, `probe_upgrades()` and the `unassign()` pseudo-upgrade.
- `stellar_idle.collection`: `Collection` is a floating "+N resource" marker that rises, slows and then expires.
- `stellar_idle.events`:
  - `Event` lists the game events.
  - `Tween` is an ease-out camera tween.
  - `Dialogue` and `DialogueBox` handle message sequences, camera moves and confirm/cancel prompts.
  - `EventManager` queues events and holds each one back until its dialogue allows it through.
- `stellar_idle.events_list`: `build_cutscenes(depot_box, mines_box, plant_box, gate_box)` builds the nine scripted dialogues.
- `stellar_idle.cloud` and `stellar_idle.vignette`:
  - `Cloud` is a ring of orbiting fog circles with angular fade ranges.
  - `Vignette` is the screen fade plus the clouds that open up on unlock events.
- `stellar_idle.asteroid_field`: `AsteroidField` holds three belts of orbiting `Asteroid`s. Asteroids throw off `Debris` while drilled.
- `stellar_idle.storm`:
  - `NebulaStorm` spawns arcing and conduit lightning `Bolt`s.
  - `Nebulous` is a noise-driven flow field.
  - The module also has the colour helpers `animated_gradient_color`, `rgba_to_u32` and `u32_to_rgba`.
- `stellar_idle.drone`: `Drone` works in one of four `DroneMode`s: it surveys the planet, mines asteroids, ships metals or harvests storm power. Its routes are set by a `StationLayout`.

## Example

```python
from stellar_idle.numbers import format_number
from stellar_idle.resources import Resource
from stellar_idle.upgrade import CostFormula

print(format_number(12_345))          # 12.3K
print(Resource.METALS)                # METALS

cost = CostFormula.DOUBLE.calculate_cost([(Resource.RESEARCH, 15)], 2)
print(cost[0][1])                     # 60
```

## What it does not do

The package has none of the following:

- no command and no game loop
- no rendering and no reading of input devices
- no saving or loading of game state
- no player object or resource bank
- no station objects for the exoplanet, depot, mines, power plant, jumpgate or research complex, and no upgrade pop-up panels

The caller must drive the modules above and supply all of these pieces.

## Testing

```
pip install -e ".[test]"
pytest
```