# storage.py
from __future__ import annotations

import json
import logging
import shutil
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, List, Optional

from .html_patch import GameExportError, format_game_name, process_game_html

log = logging.getLogger(__name__)

PREVIEWS_DIR = "previews"
CATALOG_NAME = "catalog.json"
PREVIEW_EXTS = (".png", ".jpg", ".jpeg", ".gif", ".webp")


@dataclass(frozen=True)
class GameEntry:
    id: str
    name: str
    path: str
    preview: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict) -> "GameEntry":
        return cls(
            id=data["id"],
            name=data.get("name") or format_game_name(data["id"]),
            path=data.get("path") or f"{data['id']}/",
            preview=data.get("preview"),
        )


def find_preview(previews_dir: Path, game_id: str) -> Optional[str]:
    for ext in PREVIEW_EXTS:
        if (previews_dir / f"{game_id}{ext}").is_file():
            return f"{PREVIEWS_DIR}/{game_id}{ext}"
    return None


def load_catalog(dist_dir: Path) -> List[GameEntry]:
    path = Path(dist_dir) / CATALOG_NAME
    if not path.exists():
        return []
    try:
        items = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        log.warning(f"Ignoring unreadable catalog {path}: {e}")
        return []
    return [GameEntry.from_dict(x) for x in items]


def save_catalog(dist_dir: Path, games: List[GameEntry]) -> Path:
    path = Path(dist_dir) / CATALOG_NAME
    path.write_text(
        json.dumps([asdict(g) for g in games], ensure_ascii=False, indent=2) + "\n",
        encoding="utf-8",
    )
    return path


def _copy_assets(src_dir: Path, dest_dir: Path) -> int:
    count = 0
    for item in sorted(src_dir.iterdir()):
        if item.name == "index.html":
            continue
        target = dest_dir / item.name
        if item.is_dir():
            shutil.copytree(item, target, dirs_exist_ok=True)
        else:
            shutil.copy2(item, target)
        count += 1
    return count


def process_game(src_dir: Path, dist_dir: Path) -> GameEntry:
    """Patch one exported game into dist/<name>/. Raises GameExportError for unusable exports."""
    game_id = src_dir.name
    name = format_game_name(game_id)
    # Undecodable bytes become U+FFFD rather than failing the build
    html = (src_dir / "index.html").read_text(encoding="utf-8", errors="replace")
    processed = process_game_html(html, name)

    game_dist = dist_dir / game_id
    game_dist.mkdir(parents=True, exist_ok=True)
    (game_dist / "index.html").write_text(processed, encoding="utf-8")
    _copy_assets(src_dir, game_dist)
    return GameEntry(id=game_id, name=name, path=f"{game_id}/")


def copy_previews(public_dir: Path, dist_dir: Path) -> int:
    src = public_dir / PREVIEWS_DIR
    if not src.is_dir():
        return 0
    dest = dist_dir / PREVIEWS_DIR
    dest.mkdir(parents=True, exist_ok=True)
    copied = 0
    for preview in sorted(src.iterdir()):
        if preview.is_file():
            shutil.copy2(preview, dest / preview.name)
            copied += 1
    if copied:
        log.info(f"  Copied {copied} preview image(s)")
    return copied


def process_games(public_dir: Path, dist_dir: Path) -> List[GameEntry]:
    public_dir = Path(public_dir)
    dist_dir = Path(dist_dir)
    log.info(f"Processing games from {public_dir}/ to {dist_dir}/...")

    if not public_dir.is_dir():
        log.warning(f"No public directory found at {public_dir}")
        return []
    dist_dir.mkdir(parents=True, exist_ok=True)

    previews_src = public_dir / PREVIEWS_DIR
    games: List[GameEntry] = []
    for entry in sorted(public_dir.iterdir()):
        if not entry.is_dir() or entry.name == PREVIEWS_DIR:
            continue
        if not (entry / "index.html").exists():
            log.info(f"  Skipping {entry.name} (no index.html)")
            continue
        try:
            game = process_game(entry, dist_dir)
        except GameExportError as e:
            log.warning(f"  Skipping {entry.name}: {e}")
            continue
        preview = find_preview(previews_src, game.id)
        if preview:
            game = GameEntry(id=game.id, name=game.name, path=game.path, preview=preview)
        games.append(game)
        log.info(f"  Processed: {game.name}")

    copy_previews(public_dir, dist_dir)
    save_catalog(dist_dir, games)
    log.info(f"Done! Processed {len(games)} game(s)")
    return games
