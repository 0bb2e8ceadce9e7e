# tests/test_html_patch.py
import pytest

from picoshelf.html_patch import (
    ENABLED_TOUCH, VIEWPORT_META, GameExportError, format_game_name, process_game_html,
)


def test_format_game_name():
    assert format_game_name("space-cat") == "Space Cat"
    assert format_game_name("tiny-dungeon-2") == "Tiny Dungeon 2"
    assert format_game_name("mcGuffin") == "McGuffin"


def test_viewport_and_title(export_html):
    out = process_game_html(export_html, "Space Cat")
    assert VIEWPORT_META in out
    assert 'content="width=device-width, user-scalable=no"' not in out
    assert "<title>Space Cat</title>" in out
    assert "Picotron Cartridge" not in out


def test_title_is_escaped(export_html):
    out = process_game_html(export_html, "Cats & <Dogs>")
    assert "<title>Cats &amp; &lt;Dogs&gt;</title>" in out


def test_head_gets_metas_and_css(export_html):
    out = process_game_html(export_html, "Space Cat")
    head = out.split("</head>")[0]
    assert '<meta name="apple-mobile-web-app-capable" content="yes">' in head
    assert '<meta name="theme-color" content="#222222">' in head
    assert "touch-action: none;" in head
    assert "(max-height: 500px)" in head
    assert "#touch_controls_gfx" in head


def test_touch_detection_enabled(export_html):
    out = process_game_html(export_html, "Space Cat")
    assert ENABLED_TOUCH in out
    assert "no touch controls yet" not in out


def test_landscape_script_before_body_end(export_html):
    out = process_game_html(export_html, "Space Cat")
    body_end = out.index("</body>")
    script = out.rindex("<script>", 0, body_end)
    injected = out[script:body_end]
    assert "p8_update_layout" in injected
    assert "stopImmediatePropagation" in injected
    assert "window.innerHeight < 500" in injected
    assert "{{" not in injected
    assert '["touch_controls_gfx", "touch_controls_background"' in injected


def test_autoplay_untouched(export_html):
    assert "var p8_autoplay = false;" in process_game_html(export_html, "X")


def test_missing_body_rejected():
    with pytest.raises(GameExportError):
        process_game_html("<html><head></head><p>hi</p></html>", "Broken")
