# config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DEFAULT_SITE_TITLE = "Picotron Games"
DEFAULT_PORT = 5173


@dataclass(frozen=True)
class Settings:
    public_dir: Path
    dist_dir: Path
    site_title: str = DEFAULT_SITE_TITLE
    port: int = DEFAULT_PORT
    log_level: str = "INFO"


def load_settings() -> Settings:
    # .env from the working directory; real environment variables still win
    load_dotenv(find_dotenv(usecwd=True))
    port = os.getenv("PICOSHELF_PORT", str(DEFAULT_PORT))
    try:
        port_num = int(port)
    except ValueError:
        raise ValueError(f"PICOSHELF_PORT must be an integer, got {port!r}")
    return Settings(
        public_dir=Path(os.getenv("PICOSHELF_PUBLIC_DIR", "public")),
        dist_dir=Path(os.getenv("PICOSHELF_DIST_DIR", "dist")),
        site_title=os.getenv("PICOSHELF_SITE_TITLE", DEFAULT_SITE_TITLE),
        port=port_num,
        log_level=os.getenv("PICOSHELF_LOG_LEVEL", "INFO").upper(),
    )
