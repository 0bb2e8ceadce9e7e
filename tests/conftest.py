import pytest

from picoshelf.host import Page
from picoshelf.landscape import LandscapeSupport


@pytest.fixture
def phone_landscape():
    """Landscape phone, touch seen, game running, landscape layer installed."""
    page = Page.exported(844, 390, touch_detected=True, running=True)
    LandscapeSupport(page).install()
    return page


@pytest.fixture
def phone_portrait():
    page = Page.exported(390, 844, touch_detected=True, running=True)
    LandscapeSupport(page).install()
    return page


EXPORT_HTML = """<!DOCTYPE html>
<html>
<head>
<title>Picotron Cartridge</title>
<meta name="viewport" content="width=device-width, user-scalable=no">
<style>canvas { width: 480px; }</style>
</head>
<body>
<div id="p8_container"><div id="p8_playarea"><canvas id="canvas"></canvas></div></div>
<script>
\tvar p8_touch_detected = false;
\t// ** commented for first release; no touch controls yet **
\t// addEventListener("touchstart", function(event){p8_touch_detected = true; },  {passive: true});
\tvar p8_autoplay = false;
</script>
</body>
</html>
"""


@pytest.fixture
def export_html():
    return EXPORT_HTML


@pytest.fixture
def public_dir(tmp_path):
    """public/ with two exported games, a stray file and a folder without index.html."""
    root = tmp_path / "public"
    for name in ("space-cat", "tiny-dungeon"):
        game = root / name
        game.mkdir(parents=True)
        (game / "index.html").write_text(EXPORT_HTML, encoding="utf-8")
    (root / "space-cat" / "space-cat.js").write_text("// cart", encoding="utf-8")
    (root / "space-cat" / "sfx").mkdir()
    (root / "space-cat" / "sfx" / "jump.ogg").write_bytes(b"OggS")
    (root / "notes").mkdir()
    (root / "notes" / "readme.txt").write_text("wip", encoding="utf-8")
    (root / "README.md").write_text("games", encoding="utf-8")
    previews = root / "previews"
    previews.mkdir()
    (previews / "space-cat.png").write_bytes(b"\x89PNG")
    return root
