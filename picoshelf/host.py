# host.py
"""
Model of the browser page a Picotron export runs in.

Only the parts the landscape layer touches are modelled: the viewport, the
document (elements by id, touch listeners), requestAnimationFrame and the
runtime globals the export exposes (pico8_buttons, p8_touch_detected,
p8_is_running, p8_update_layout).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

log = logging.getLogger(__name__)

Listener = Callable[["TouchEvent"], None]
FrameCallback = Callable[[], None]


@dataclass
class Viewport:
    width: float
    height: float


@dataclass
class Element:
    id: str
    style: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Touch:
    client_x: float
    client_y: float


@dataclass
class TouchEvent:
    type: str
    touches: List[Touch] = field(default_factory=list)
    default_prevented: bool = False
    propagation_stopped: bool = False
    _passive: bool = field(default=False, repr=False)

    def prevent_default(self) -> None:
        # Browsers ignore preventDefault() inside passive listeners
        if not self._passive:
            self.default_prevented = True

    def stop_immediate_propagation(self) -> None:
        self.propagation_stopped = True


@dataclass
class _Registration:
    listener: Listener
    capture: bool
    passive: bool


class Document:
    def __init__(self, element_ids: Optional[List[str]] = None):
        self._elements: Dict[str, Element] = {}
        self._listeners: Dict[str, List[_Registration]] = {}
        for element_id in element_ids or []:
            self.add_element(element_id)

    def add_element(self, element_id: str) -> Element:
        el = Element(element_id)
        self._elements[element_id] = el
        return el

    def remove_element(self, element_id: str) -> None:
        self._elements.pop(element_id, None)

    def get_element_by_id(self, element_id: str) -> Optional[Element]:
        return self._elements.get(element_id)

    def add_event_listener(
        self,
        event_type: str,
        listener: Listener,
        *,
        capture: bool = False,
        passive: bool = True,
    ) -> None:
        self._listeners.setdefault(event_type, []).append(
            _Registration(listener, capture, passive)
        )

    def listeners(self, event_type: str) -> List[Listener]:
        return [r.listener for r in self._listeners.get(event_type, [])]

    def dispatch(self, event: TouchEvent) -> TouchEvent:
        """
        Deliver `event` the way a document-level target would:
        capturing listeners first, then the rest, each in registration order.
        """
        regs = self._listeners.get(event.type, [])
        ordered = [r for r in regs if r.capture] + [r for r in regs if not r.capture]
        for reg in ordered:
            event._passive = reg.passive
            reg.listener(event)
            if event.propagation_stopped:
                break
        event._passive = False
        return event


class FrameScheduler:
    """requestAnimationFrame: callbacks queued now run on the next frame."""

    def __init__(self):
        self._queue: List[FrameCallback] = []
        self.frame_count = 0

    def request_animation_frame(self, callback: FrameCallback) -> None:
        self._queue.append(callback)

    @property
    def pending(self) -> int:
        return len(self._queue)

    def run_frame(self) -> int:
        callbacks, self._queue = self._queue, []
        self.frame_count += 1
        for cb in callbacks:
            try:
                cb()
            except Exception:
                # one broken frame must not stall the loop
                log.exception(f"Frame {self.frame_count} callback failed")
        return len(callbacks)

    def run_frames(self, n: int) -> None:
        for _ in range(n):
            self.run_frame()


class PicoRuntime:
    """
    Globals of the exported player page.

    `update_layout` is looked up on the instance every time the native loop
    reschedules, the same way the export calls the global p8_update_layout,
    so replacing it swaps the function for every later frame.
    """

    def __init__(self, scheduler: FrameScheduler, *, touch_detected: bool = False, running: bool = False):
        self.scheduler = scheduler
        self.buttons: List[int] = [0] * 8
        self.touch_detected = touch_detected
        self.running = running
        self.native_layout_calls = 0
        self.update_layout: FrameCallback = self.native_update_layout

    def native_update_layout(self) -> None:
        self.native_layout_calls += 1
        self.scheduler.request_animation_frame(lambda: self.update_layout())

    def start(self) -> None:
        self.running = True
        self.scheduler.request_animation_frame(lambda: self.update_layout())


# Element ids present in a stock Picotron HTML export
EXPORT_ELEMENT_IDS = [
    "canvas",
    "p8_container",
    "p8_playarea",
    "touch_controls_gfx",
    "touch_controls_background",
    "controls_left_panel",
    "controls_right_panel",
]


@dataclass
class Page:
    viewport: Viewport
    document: Document
    scheduler: FrameScheduler
    runtime: PicoRuntime

    @classmethod
    def exported(cls, width: float, height: float, *, touch_detected: bool = False,
                 running: bool = False) -> "Page":
        scheduler = FrameScheduler()
        return cls(
            viewport=Viewport(width, height),
            document=Document(EXPORT_ELEMENT_IDS),
            scheduler=scheduler,
            runtime=PicoRuntime(scheduler, touch_detected=touch_detected, running=running),
        )

    def touch(self, event_type: str, *points) -> TouchEvent:
        touches = [Touch(float(x), float(y)) for x, y in points]
        return self.document.dispatch(TouchEvent(event_type, touches))
