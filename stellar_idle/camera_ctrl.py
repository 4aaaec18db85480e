"""Camera panning and zooming driven by gamepad and pointer input."""

from __future__ import annotations

from dataclasses import dataclass

from stellar_idle.btn import Pointer

MOVE_SPEED = 3.0
DAMPING = 0.4
VELOCITY_EPSILON = 0.2
MAX_X = 640.0
MAX_Y = 400.0
ZOOM_COOLDOWN = 5


@dataclass
class Gamepad:
    """Buttons held on the first gamepad during one frame."""

    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    a: bool = False
    b: bool = False


@dataclass
class Camera:
    """The view into the world."""

    x: float = 320.0
    y: float = 240.0
    zoom: float = 1.0

    def move_zoom(self, delta: float) -> None:
        self.zoom += delta


@dataclass
class CameraCtrl:
    """Tracks where the player wants the camera to be."""

    zoom_tick: int = 0
    dragging: bool = False
    last_pointer_pos: tuple[float, float] = (0.0, 0.0)
    pos: tuple[float, float] = (320.0, 200.0)
    velocity: tuple[float, float] = (0.0, 0.0)

    def update(self, gamepad: Gamepad, pointer: Pointer, camera: Camera, tick: int) -> None:
        x, y = self.pos
        moved = False
        if gamepad.left:
            x -= MOVE_SPEED
            moved = True
        if gamepad.right:
            x += MOVE_SPEED
            moved = True
        if gamepad.up:
            y -= MOVE_SPEED
            moved = True
        if gamepad.down:
            y += MOVE_SPEED
            moved = True

        px, py = (float(v) for v in pointer.screen)
        if pointer.just_pressed:
            self.dragging = True
            self.last_pointer_pos = (px, py)
            self.velocity = (0.0, 0.0)
        elif pointer.pressed and self.dragging:
            lx, ly = self.last_pointer_pos
            vx, vy = self.velocity
            self.velocity = (vx - (px - lx), vy - (py - ly))
            self.last_pointer_pos = (px, py)
        elif pointer.released:
            self.dragging = False

        vx, vy = self.velocity
        x += vx
        y += vy
        vx *= DAMPING
        # The vertical component is taken from the already damped horizontal one.
        vy = vx * DAMPING
        self.velocity = (vx, vy)

        if abs(vx) >= VELOCITY_EPSILON or abs(vy) >= VELOCITY_EPSILON:
            moved = True
        if moved:
            x = min(max(x, 0.0), MAX_X)
            y = min(max(y, 0.0), MAX_Y)
        self.pos = (x, y)

        self._update_zoom(gamepad, pointer, camera, tick)

    def _update_zoom(self, gamepad: Gamepad, pointer: Pointer, camera: Camera, tick: int) -> None:
        ready = tick - self.zoom_tick > ZOOM_COOLDOWN
        scroll = pointer.scroll[1]
        if (gamepad.a or scroll > 0) and camera.zoom < 4.0 and ready:
            camera.move_zoom(1.0)
            if camera.zoom >= 3.0:
                camera.zoom = 4.0
            self.zoom_tick = tick
        elif (gamepad.b or scroll < 0) and camera.zoom > 0.5 and ready:
            camera.move_zoom(-1.0)
            if camera.zoom <= 1.0:
                camera.zoom = 1.0
            if camera.zoom == 3.0:
                camera.zoom = 2.0
            self.zoom_tick = tick

    def update_cam(self, camera: Camera) -> None:
        camera.x, camera.y = self.pos

    def stop_drag(self) -> None:
        """Cancel any drag in progress and its momentum."""
        self.velocity = (0.0, 0.0)
        self.last_pointer_pos = (0.0, 0.0)
        self.dragging = False