# layout.py
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .host import Page

# Picotron renders at 480x270
BASE_WIDTH = 480
BASE_HEIGHT = 270

# Phones in landscape are shorter than this
MAX_LANDSCAPE_HEIGHT = 500

CANVAS_ID = "canvas"
CONTAINER_ID = "p8_container"
PLAYAREA_ID = "p8_playarea"

OVERLAY_IDS = (
    "touch_controls_gfx",
    "touch_controls_background",
    "controls_left_panel",
    "controls_right_panel",
)


class LayoutMode(Enum):
    NORMAL = "normal"
    LANDSCAPE_FULLSCREEN = "landscape-fullscreen"


def layout_mode(width: float, height: float, touch_detected: bool, running: bool) -> LayoutMode:
    if width > height and height < MAX_LANDSCAPE_HEIGHT and touch_detected and running:
        return LayoutMode.LANDSCAPE_FULLSCREEN
    return LayoutMode.NORMAL


@dataclass
class LandscapeContext:
    """State shared by the touch listeners and the layout override of one page."""
    page: Page
    original_update_layout: Optional[Callable[[], None]] = None
    listeners_installed: bool = False

    @property
    def mode(self) -> LayoutMode:
        vp = self.page.viewport
        rt = self.page.runtime
        return layout_mode(vp.width, vp.height, rt.touch_detected, rt.running)

    @property
    def active(self) -> bool:
        return self.mode is LayoutMode.LANDSCAPE_FULLSCREEN


@dataclass(frozen=True)
class CanvasFit:
    scale: float
    width: int
    height: int
    margin_left: int
    margin_top: int


def fit_canvas(width: float, height: float) -> CanvasFit:
    """Largest 480:270 box that fits the viewport, centred horizontally, pinned to the top."""
    scale = min(width / BASE_WIDTH, height / BASE_HEIGHT)
    # The bounding side fills the viewport exactly; only the other side is floored
    if width * BASE_HEIGHT <= height * BASE_WIDTH:
        cw = math.floor(width)
        ch = math.floor(width * BASE_HEIGHT / BASE_WIDTH)
    else:
        ch = math.floor(height)
        cw = math.floor(height * BASE_WIDTH / BASE_HEIGHT)
    return CanvasFit(
        scale=scale,
        width=cw,
        height=ch,
        margin_left=math.floor((width - cw) / 2),
        margin_top=0,
    )


def _px(value: int) -> str:
    return f"{value}px"


class LayoutRescaler:
    def __init__(self, context: LandscapeContext):
        self.context = context

    def wrap(self) -> bool:
        """Replace runtime.update_layout, keeping the original for fallback. Only wraps once."""
        ctx = self.context
        if ctx.original_update_layout is not None:
            return False
        runtime = ctx.page.runtime
        ctx.original_update_layout = runtime.update_layout
        runtime.update_layout = self.update_layout
        return True

    def update_layout(self) -> None:
        ctx = self.context
        if ctx.active and self.apply():
            ctx.page.scheduler.request_animation_frame(lambda: ctx.page.runtime.update_layout())
            return
        # The original layout is the required default path
        if ctx.original_update_layout is not None:
            ctx.original_update_layout()

    def apply(self) -> bool:
        """Style the page for landscape fullscreen; False when a required element is missing."""
        page = self.context.page
        doc = page.document
        canvas = doc.get_element_by_id(CANVAS_ID)
        container = doc.get_element_by_id(CONTAINER_ID)
        playarea = doc.get_element_by_id(PLAYAREA_ID)
        if canvas is None or container is None or playarea is None:
            return False

        fit = fit_canvas(page.viewport.width, page.viewport.height)
        canvas.style.update({
            "width": _px(fit.width),
            "height": _px(fit.height),
            "margin-left": _px(fit.margin_left),
            "margin-top": _px(fit.margin_top),
            "pointer-events": "auto",
        })
        container.style.update({
            "width": _px(fit.width),
            "height": _px(fit.height),
            "margin-left": _px(fit.margin_left),
            "margin-top": _px(fit.margin_top),
        })
        playarea.style["margin-top"] = "0"

        for overlay_id in OVERLAY_IDS:
            el = doc.get_element_by_id(overlay_id)
            if el is not None:
                el.style["display"] = "none"
        return True
