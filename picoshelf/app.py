# app.py
from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Optional

from flask import Flask, jsonify, send_from_directory

from .config import Settings, load_settings
from .storage import load_catalog


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Local preview of a built dist/ folder."""
    settings = settings or load_settings()
    dist_dir = Path(settings.dist_dir).resolve()
    if not (dist_dir / "index.html").exists():
        raise FileNotFoundError(
            f"No gallery at {dist_dir / 'index.html'}. Run `picoshelf build` first."
        )

    app = Flask(__name__)

    # ---------- Pages ----------
    @app.get("/")
    def gallery():
        return send_from_directory(dist_dir, "index.html")

    @app.get("/<slug>/")
    def play_game(slug: str):
        game_dir = dist_dir / slug
        if not (game_dir / "index.html").exists():
            return ("Game not found", 404)
        return send_from_directory(game_dir, "index.html")

    # ---------- APIs ----------
    @app.get("/api/games")
    def api_games():
        return jsonify([asdict(g) for g in load_catalog(dist_dir)])

    # Everything else (game assets, previews)
    @app.get("/<path:subpath>")
    def site_static(subpath: str):
        return send_from_directory(dist_dir, subpath)

    return app
