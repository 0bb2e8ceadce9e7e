# gallery.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from .config import DEFAULT_SITE_TITLE
from .storage import GameEntry
from .templating import render

log = logging.getLogger(__name__)


def render_gallery(games: Iterable[GameEntry], title: str = DEFAULT_SITE_TITLE,
                   public_dir: str = "public") -> str:
    return render("gallery.html", games=list(games), title=title, public_dir=public_dir)


def write_gallery(dist_dir: Path, games: Iterable[GameEntry], title: str = DEFAULT_SITE_TITLE,
                  public_dir: str = "public") -> Path:
    games = list(games)
    out = Path(dist_dir) / "index.html"
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(render_gallery(games, title, public_dir), encoding="utf-8")
    log.info(f"Gallery written to {out} ({len(games)} game(s))")
    return out
