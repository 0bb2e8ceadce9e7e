# cli.py
"""
picoshelf command line.

Usage examples:
  picoshelf build
  picoshelf build --public exports/ --dist site/
  picoshelf serve --port 8000
  picoshelf inspect --width 844 --height 390 --touch 100,195 --touch 700,50
"""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Tuple

from .config import Settings, load_settings
from .gallery import write_gallery
from .host import Page
from .landscape import LandscapeSupport
from .layout import fit_canvas
from .storage import process_games
from .touch_remap import describe_buttons

log = logging.getLogger("picoshelf")


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def build(settings: Settings) -> int:
    games = process_games(settings.public_dir, settings.dist_dir)
    write_gallery(settings.dist_dir, games, settings.site_title, str(settings.public_dir))
    return len(games)


def serve(settings: Settings) -> None:
    from .app import create_app

    app = create_app(settings)
    app.run(port=settings.port, debug=False)


def parse_point(text: str) -> Tuple[float, float]:
    try:
        x, y = text.split(",")
        return float(x), float(y)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y but got {text!r}")


def inspect_page(width: float, height: float, touches: List[Tuple[float, float]],
                 touch_detected: bool = True, running: bool = True) -> List[str]:
    """Run the landscape layer against a simulated export page and report what it does."""
    page = Page.exported(width, height, touch_detected=touch_detected, running=running)
    support = LandscapeSupport(page)
    support.install()
    page.runtime.start()
    page.scheduler.run_frame()

    lines = [f"viewport : {width:g}x{height:g}", f"mode     : {support.mode().value}"]
    fit = fit_canvas(width, height)
    lines.append(
        f"canvas   : {fit.width}x{fit.height} at margin-left {fit.margin_left}px "
        f"(scale {fit.scale:.3f})"
    )
    if touches:
        event = page.touch("touchstart", *touches)
        claimed = "claimed" if event.propagation_stopped else "passed through"
        lines.append(f"buttons  : {describe_buttons(page.runtime.buttons[0])} "
                     f"(0x{page.runtime.buttons[0]:02x}, {claimed})")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="picoshelf",
        description="Build a mobile-friendly gallery site from Picotron HTML exports.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_build = sub.add_parser("build", help="Process public/ into dist/ and render the gallery")
    p_build.add_argument("--public", default=None, help="Folder of exported games (default: $PICOSHELF_PUBLIC_DIR or public)")
    p_build.add_argument("--dist", default=None, help="Output folder (default: $PICOSHELF_DIST_DIR or dist)")
    p_build.add_argument("--title", default=None, help="Gallery page title")

    p_serve = sub.add_parser("serve", help="Preview dist/ locally")
    p_serve.add_argument("--dist", default=None)
    p_serve.add_argument("--port", type=int, default=None)

    p_inspect = sub.add_parser("inspect", help="Show layout and button mapping for a viewport")
    p_inspect.add_argument("--width", type=float, required=True)
    p_inspect.add_argument("--height", type=float, required=True)
    p_inspect.add_argument("--touch", type=parse_point, action="append", default=[], metavar="X,Y")
    p_inspect.add_argument("--no-touch-detected", action="store_true")
    p_inspect.add_argument("--paused", action="store_true")

    args = parser.parse_args(argv)
    settings = load_settings()
    setup_logging(settings.log_level)

    overrides = {}
    if getattr(args, "public", None):
        overrides["public_dir"] = Path(args.public)
    if getattr(args, "dist", None):
        overrides["dist_dir"] = Path(args.dist)
    if getattr(args, "title", None):
        overrides["site_title"] = args.title
    if getattr(args, "port", None):
        overrides["port"] = args.port
    settings = replace(settings, **overrides)

    if args.command == "build":
        try:
            build(settings)
        except (OSError, ValueError) as e:
            log.error(f"Build failed: {e}")
            return 1
    elif args.command == "serve":
        try:
            serve(settings)
        except FileNotFoundError as e:
            log.error(str(e))
            return 1
    elif args.command == "inspect":
        lines = inspect_page(
            args.width, args.height, args.touch,
            touch_detected=not args.no_touch_detected,
            running=not args.paused,
        )
        print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())
