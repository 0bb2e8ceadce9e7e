# html_patch.py
"""
Mobile fix-ups for Picotron HTML exports.

Stock exports scroll and zoom on phones, keep their touch controls commented
out and letterbox the canvas into the top two thirds of a landscape screen.
process_game_html() patches all of that in place.
"""
from __future__ import annotations

import html as html_lib
import re

from .templating import landscape_script, mobile_css

VIEWPORT_META = (
    '<meta name="viewport" content="width=device-width, initial-scale=1.0, '
    'maximum-scale=1.0, user-scalable=no, viewport-fit=cover">'
)

APP_METAS = """
  <meta name="apple-mobile-web-app-capable" content="yes">
  <meta name="apple-mobile-web-app-status-bar-style" content="black-translucent">
  <meta name="mobile-web-app-capable" content="yes">
  <meta name="theme-color" content="#222222">"""

_VIEWPORT_RE = re.compile(r'<meta name="viewport"[^>]*>', re.IGNORECASE)
_TITLE_RE = re.compile(r"<title>[^<]*</title>", re.IGNORECASE)

# Picotron ships this listener commented out
_DISABLED_TOUCH_RE = re.compile(
    r'// \*\* commented for first release; no touch controls yet \*\*\s*\n'
    r'\s*// addEventListener\("touchstart", function\(event\)\{p8_touch_detected = true; \},\s*'
    r'\{passive: true\}\);'
)
ENABLED_TOUCH = (
    '// Touch controls enabled by build script\n'
    '\taddEventListener("touchstart", function(event){p8_touch_detected = true; },  {passive: true});'
)


class GameExportError(ValueError):
    """The page is not a complete HTML export we know how to patch."""


def ensure_export_html(html: str) -> None:
    low = html.lower()
    missing = [tag for tag in ("</head>", "</body>") if tag not in low]
    if missing:
        raise GameExportError(f"HTML export is missing {', '.join(missing)}")


def format_game_name(folder_name: str) -> str:
    """'space-cat-2' -> 'Space Cat 2'."""
    return " ".join(word[:1].upper() + word[1:] for word in folder_name.split("-"))


def _replace_tag(html: str, tag: str, replacement: str) -> str:
    # Case-insensitive, first occurrence, literal replacement
    m = re.search(re.escape(tag), html, flags=re.IGNORECASE)
    if not m:
        return html
    return html[:m.start()] + replacement + html[m.end():]


def process_game_html(html: str, game_name: str) -> str:
    ensure_export_html(html)
    processed = html

    # 1) viewport
    processed = _VIEWPORT_RE.sub(lambda _: VIEWPORT_META, processed, count=1)

    # 2) web-app metas + mobile CSS
    processed = _replace_tag(
        processed, "</head>", f"{APP_METAS}\n<style>\n{mobile_css()}</style>\n</head>"
    )

    # 3) title
    title = f"<title>{html_lib.escape(game_name)}</title>"
    processed = _TITLE_RE.sub(lambda _: title, processed, count=1)

    # 4) autoplay stays off: Module.pico8Boot isn't ready on page load

    # 5) touch detection
    processed = _DISABLED_TOUCH_RE.sub(lambda _: ENABLED_TOUCH, processed, count=1)

    # 6) landscape fullscreen script
    processed = _replace_tag(
        processed, "</body>", f"<script>\n{landscape_script()}</script>\n</body>"
    )
    return processed
