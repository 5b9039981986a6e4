"""Shared pytest fixtures."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

DEFAULT_CMAP = {0x41: "A", 0x42: "B", 0x100: "Amacron"}


def _box_glyph(empty: bool = False):
    pen = TTGlyphPen(None)
    if not empty:
        pen.moveTo((100, 0))
        pen.lineTo((100, 700))
        pen.lineTo((500, 700))
        pen.lineTo((500, 0))
        pen.closePath()
    return pen.glyph()


def build_font(path: Path, cmap: dict[int, str] | None = None) -> Path:
    """Write a minimal TrueType font mapping the given codepoints."""
    cmap = cmap or DEFAULT_CMAP
    glyph_order = [".notdef", *sorted(set(cmap.values()))]

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    fb.setupGlyf({name: _box_glyph(empty=name == ".notdef") for name in glyph_order})
    fb.setupHorizontalMetrics({name: (600, 100) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Subset Test", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()
    path.parent.mkdir(parents=True, exist_ok=True)
    fb.save(str(path))
    return path


@pytest.fixture
def input_dir(tmp_path):
    directory = tmp_path / "input"
    directory.mkdir()
    return directory


@pytest.fixture
def output_dir(tmp_path):
    return tmp_path / "output"


@pytest.fixture
def make_font(input_dir):
    """Factory writing a test font into the input directory."""

    def _make(name: str = "Test-Regular.ttf", cmap: dict[int, str] | None = None):
        return build_font(input_dir / name, cmap)

    return _make
