# touch_remap.py
"""
Touch remapping for landscape fullscreen.

In landscape the canvas covers the whole screen, where the export's own
pico8_buttons_event ignores touches. While the page is in landscape
fullscreen the left half becomes a d-pad and the right half the O/X buttons;
otherwise every touch goes to the export's handlers untouched.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .host import Touch, TouchEvent
from .layout import LandscapeContext

BUTTON_LEFT = 0x01
BUTTON_RIGHT = 0x02
BUTTON_UP = 0x04
BUTTON_DOWN = 0x08
BUTTON_O = 0x10
BUTTON_X = 0x20

DPAD_BITS = BUTTON_LEFT | BUTTON_RIGHT | BUTTON_UP | BUTTON_DOWN

DEADZONE = 30
# An axis counts when its offset beats the other one scaled by this
AXIS_DOMINANCE = 0.6
# O covers y < 60% of the height, X covers y > 40%; both fire in between
O_ZONE = 0.6
X_ZONE = 0.4

TOUCH_EVENTS = ("touchstart", "touchmove", "touchend")


@dataclass(frozen=True)
class TouchPoint:
    x: float
    y: float

    @classmethod
    def from_touch(cls, touch: Touch) -> "TouchPoint":
        return cls(touch.client_x, touch.client_y)


def classify_dpad(dx: float, dy: float) -> int:
    b = 0
    if abs(dx) > abs(dy) * AXIS_DOMINANCE:
        if dx < -DEADZONE:
            b |= BUTTON_LEFT
        if dx > DEADZONE:
            b |= BUTTON_RIGHT
    if abs(dy) > abs(dx) * AXIS_DOMINANCE:
        if dy < -DEADZONE:
            b |= BUTTON_UP
        if dy > DEADZONE:
            b |= BUTTON_DOWN
    return b


def classify_touch(point: TouchPoint, width: float, height: float) -> int:
    """Button bits for one touch on a `width` x `height` viewport."""
    if point.x < width / 2:
        return classify_dpad(point.x - width / 4, point.y - height / 2)
    b = 0
    if point.y < height * O_ZONE:
        b |= BUTTON_O
    if point.y > height * X_ZONE:
        b |= BUTTON_X
    return b


def classify_touches(points: Iterable[TouchPoint], width: float, height: float) -> int:
    mask = 0
    for p in points:
        mask |= classify_touch(p, width, height)
    return mask


def describe_buttons(mask: int) -> str:
    names = [
        (BUTTON_LEFT, "left"), (BUTTON_RIGHT, "right"), (BUTTON_UP, "up"),
        (BUTTON_DOWN, "down"), (BUTTON_O, "O"), (BUTTON_X, "X"),
    ]
    held = [name for bit, name in names if mask & bit]
    return "+".join(held) if held else "none"


class TouchRemapper:
    def __init__(self, context: LandscapeContext):
        self.context = context

    # ---------- listeners ----------

    def on_touch_start(self, event: TouchEvent) -> None:
        self._claim(event, self.remap(event))

    def on_touch_move(self, event: TouchEvent) -> None:
        self._claim(event, self.remap(event))

    def on_touch_end(self, event: TouchEvent) -> None:
        self._claim(event, self.release(event))

    @staticmethod
    def _claim(event: TouchEvent, claimed: bool) -> None:
        if claimed:
            event.prevent_default()
            event.stop_immediate_propagation()

    # ---------- state ----------

    def remap(self, event: TouchEvent) -> bool:
        ctx = self.context
        if not ctx.active:
            return False
        vp = ctx.page.viewport
        buttons = ctx.page.runtime.buttons
        buttons[0] = 0
        for touch in event.touches:
            buttons[0] |= classify_touch(TouchPoint.from_touch(touch), vp.width, vp.height)
        return True

    def release(self, event: TouchEvent) -> bool:
        if not self.context.active:
            return False
        # Partial release keeps the old mask until the next start/move
        if not event.touches:
            self.context.page.runtime.buttons[0] = 0
        return True

    def install_once(self) -> bool:
        ctx = self.context
        if ctx.listeners_installed:
            return False
        ctx.listeners_installed = True
        handlers = (self.on_touch_start, self.on_touch_move, self.on_touch_end)
        for event_type, handler in zip(TOUCH_EVENTS, handlers):
            ctx.page.document.add_event_listener(event_type, handler, capture=True, passive=False)
        return True
