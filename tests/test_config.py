# tests/test_config.py
from pathlib import Path

import pytest

from picoshelf.config import DEFAULT_PORT, DEFAULT_SITE_TITLE, load_settings


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for key in ("PICOSHELF_PUBLIC_DIR", "PICOSHELF_DIST_DIR", "PICOSHELF_SITE_TITLE",
                "PICOSHELF_PORT", "PICOSHELF_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    s = load_settings()
    assert s.public_dir == Path("public")
    assert s.dist_dir == Path("dist")
    assert s.port == DEFAULT_PORT
    assert s.site_title == DEFAULT_SITE_TITLE
    assert s.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PICOSHELF_DIST_DIR", "site")
    monkeypatch.setenv("PICOSHELF_PORT", "8080")
    monkeypatch.setenv("PICOSHELF_LOG_LEVEL", "debug")
    s = load_settings()
    assert s.dist_dir == Path("site")
    assert s.port == 8080
    assert s.log_level == "DEBUG"


def test_bad_port(monkeypatch):
    monkeypatch.setenv("PICOSHELF_PORT", "eighty")
    with pytest.raises(ValueError):
        load_settings()
