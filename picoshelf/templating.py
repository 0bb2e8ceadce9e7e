# templating.py
from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict

from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape

from . import layout, touch_remap


@lru_cache(maxsize=1)
def get_env() -> Environment:
    return Environment(
        loader=PackageLoader("picoshelf", "templates"),
        autoescape=select_autoescape(["html"]),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


def page_constants() -> Dict[str, Any]:
    """Values shared by the injected script/CSS and the Python model of it."""
    return {
        "max_landscape_height": layout.MAX_LANDSCAPE_HEIGHT,
        "base_width": layout.BASE_WIDTH,
        "base_height": layout.BASE_HEIGHT,
        "canvas_id": layout.CANVAS_ID,
        "container_id": layout.CONTAINER_ID,
        "playarea_id": layout.PLAYAREA_ID,
        "overlay_ids": list(layout.OVERLAY_IDS),
        "deadzone": touch_remap.DEADZONE,
        "axis_dominance": touch_remap.AXIS_DOMINANCE,
        "o_zone": touch_remap.O_ZONE,
        "x_zone": touch_remap.X_ZONE,
        "button_left": touch_remap.BUTTON_LEFT,
        "button_right": touch_remap.BUTTON_RIGHT,
        "button_up": touch_remap.BUTTON_UP,
        "button_down": touch_remap.BUTTON_DOWN,
        "button_o": touch_remap.BUTTON_O,
        "button_x": touch_remap.BUTTON_X,
    }


def render(name: str, **context: Any) -> str:
    return get_env().get_template(name).render(**context)


def landscape_script() -> str:
    return render("landscape_fullscreen.js", **page_constants())


def mobile_css() -> str:
    return render("mobile.css", **page_constants())
