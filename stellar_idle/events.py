"""Game events, scripted dialogues and the queue that ties them together."""

from __future__ import annotations

import copy
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto

from stellar_idle.btn import Bounds, Btn, Pointer
from stellar_idle.camera_ctrl import Camera, CameraCtrl

CameraWaypoint = tuple[tuple[int, int], int]

REQUIRED_CUTSCENES = 9


class Event(Enum):
    START_GAME = auto()
    SAVE_GAME = auto()
    RESET_GAME = auto()
    DRONE_DEPOT_UNLOCKABLE = auto()
    UNLOCK_DRONE_DEPOT = auto()
    MINES_UNLOCKABLE = auto()
    POWER_PLANT_UNLOCKABLE = auto()
    UNLOCK_POWER_PLANT = auto()
    LATE_GAME = auto()
    PRESTIGE = auto()
    END_GAME = auto()


def _ease_out_cubic(t: float) -> float:
    return 1.0 - (1.0 - t) ** 3


@dataclass
class Tween:
    """An integer value eased from ``start`` to ``end`` over ``duration`` ticks."""

    start: int
    end: int | None = None
    duration: int = 0
    elapsed: int = 0

    def __post_init__(self) -> None:
        if self.end is None:
            self.end = self.start
        if self.duration < 0:
            raise ValueError(f"duration must be non-negative, got {self.duration}")

    def get(self) -> int:
        """Return the current value and advance one tick."""
        assert self.end is not None
        if self.duration == 0:
            return self.end
        t = min(self.elapsed / self.duration, 1.0)
        value = round(self.start + (self.end - self.start) * _ease_out_cubic(t))
        if self.elapsed < self.duration:
            self.elapsed += 1
        return value

    def done(self) -> bool:
        return self.elapsed >= self.duration


def _default_panel() -> Bounds:
    return Bounds(224, 400 - 64 - 16, 192, 64)


def _button_slot(panel: Bounds) -> Bounds:
    return Bounds(320, 240, 48, 22).anchor_bottom(panel).anchor_right(panel).translate(-16, -4)


@dataclass
class DialogueBox:
    """The on-screen panel a dialogue is shown in."""

    panel: Bounds = field(default_factory=_default_panel)
    typed_message: str = ""
    message: str = ""
    tweens: tuple[Tween | None, Tween | None] = (None, None)
    prompt: bool = False
    confirm: Btn = field(init=False)
    cancel: Btn = field(init=False)

    def __post_init__(self) -> None:
        slot = _button_slot(self.panel)
        self.confirm = Btn("CONFIRM", slot.translate_x(-56), True, 1)
        self.cancel = Btn("CANCEL", slot, True, 1)

    def set_message(self, message: str) -> None:
        self.message = message
        self.typed_message = message

    def tween(self, target: tuple[int, int], camera: Camera) -> None:
        """Start moving the camera from where it is now towards ``target``."""
        cx, cy = int(camera.x), int(camera.y)
        tx, ty = target
        self.tweens = (
            Tween(cx, tx, abs(tx - cx) // 4),
            Tween(cy, ty, abs(ty - cy) // 4),
        )

    def update(self, camera_ctrl: CameraCtrl, pointer: Pointer) -> bool:
        """Drive the camera tween; return True when the panel is tapped."""
        xtween, ytween = self.tweens
        x, y = camera_ctrl.pos
        if xtween is not None:
            x = float(xtween.get())
        if ytween is not None:
            y = float(ytween.get())
        camera_ctrl.pos = (x, y)

        if self.panel.contains(pointer.screen) and pointer.just_pressed:
            camera_ctrl.stop_drag()
            return True
        return False

    def prompt_choice(self, camera_ctrl: CameraCtrl, pointer: Pointer) -> bool | None:
        """True on confirm, False on cancel, None while undecided."""
        self.confirm.update(pointer)
        self.cancel.update(pointer)
        if self.confirm.on_click(pointer):
            camera_ctrl.stop_drag()
            return True
        if self.cancel.on_click(pointer):
            camera_ctrl.stop_drag()
            return False
        return None


@dataclass
class Dialogue:
    """A scripted sequence of messages with timed camera moves."""

    messages: list[str]
    camera_pos: list[CameraWaypoint]
    event_broadcast: int
    prompt: bool = False
    d_box: DialogueBox = field(default_factory=DialogueBox)

    def start(self, camera: Camera) -> Dialogue:
        """Show the first message and begin any immediate camera move."""
        if not self.messages:
            raise ValueError("dialogue has no messages")
        self.d_box.set_message(self.messages[0])
        for target, delay in self.camera_pos:
            if delay == 0:
                self.d_box.tween(target, camera)
        self.d_box.prompt = self.prompt
        return self

    def advance(self, camera: Camera) -> bool:
        """Move to the next message; False when the dialogue is over."""
        self.messages.pop(0)
        self.event_broadcast -= 1
        if not self.messages:
            return False
        self.d_box.set_message(self.messages[0])
        waypoints = []
        for target, delay in self.camera_pos:
            delay -= 1
            if delay == 0:
                self.d_box.tween(target, camera)
            waypoints.append((target, delay))
        self.camera_pos = waypoints
        return True

    def update(self, camera_ctrl: CameraCtrl, camera: Camera, pointer: Pointer) -> bool:
        """Handle input for one frame; False when the dialogue has ended."""
        if not self.d_box.prompt:
            if self.d_box.update(camera_ctrl, pointer):
                return self.advance(camera)
        else:
            choice = self.d_box.prompt_choice(camera_ctrl, pointer)
            if choice is True:
                self.event_broadcast -= 1
            elif choice is False:
                return False
        return True


_CUTSCENE_FOR = {
    Event.START_GAME: 0,
    Event.DRONE_DEPOT_UNLOCKABLE: 1,
    Event.MINES_UNLOCKABLE: 2,
    Event.POWER_PLANT_UNLOCKABLE: 3,
    Event.LATE_GAME: 4,
    Event.END_GAME: 8,
}

_CONFIRMED = {
    Event.PRESTIGE: 7,
    Event.RESET_GAME: 6,
}


class EventManager:
    """Queues events and holds them back while a dialogue introduces them."""

    def __init__(self, cutscenes: list[Dialogue], camera: Camera) -> None:
        if len(cutscenes) < REQUIRED_CUTSCENES:
            raise ValueError(f"need {REQUIRED_CUTSCENES} cutscenes, got {len(cutscenes)}")
        self.cutscenes = cutscenes
        self.camera = camera
        self.events: list[Event] = []
        self.over = False
        self.dialogue: Dialogue | None = None
        self._start_cutscene(0)

    def _start_cutscene(self, index: int) -> None:
        self.dialogue = copy.deepcopy(self.cutscenes[index]).start(self.camera)

    def trigger(self, event: Event) -> None:
        self.events.append(event)

    def process_events(self, handler: Callable[[Event], None]) -> None:
        """Deliver the first queued event once its dialogue allows it."""
        if self.events:
            event = self.events[0]
            if self.dialogue is not None:
                if self.dialogue.event_broadcast <= 0:
                    handler(event)
                    self.events.clear()
                    if self.dialogue.prompt:
                        self.dialogue = None
            elif event in _CUTSCENE_FOR:
                self._start_cutscene(_CUTSCENE_FOR[event])
            elif event in _CONFIRMED:
                if self.over:
                    self.events.clear()
                    self.over = False
                else:
                    self._start_cutscene(_CONFIRMED[event])
            else:
                handler(event)
                self.events.clear()
        self.over = False

    def update(self, camera_ctrl: CameraCtrl, camera: Camera, pointer: Pointer) -> None:
        if self.dialogue is not None and not self.dialogue.update(camera_ctrl, camera, pointer):
            self.over = True
            self.dialogue = None