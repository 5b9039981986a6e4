"""
Integration tests for the in-process fontTools backend.

Fonts are built on the fly with FontBuilder, subsetted, and read back.
"""

from fontTools.ttLib import TTFont

from webfont_subset.backends import library
from webfont_subset.backends.base import Status
from webfont_subset.backends.library import LibraryBackend
from webfont_subset.config.options import Flavor
from webfont_subset.core.catalog import SubsetCatalog, SubsetRequest
from webfont_subset.core.font_io import discover_fonts
from webfont_subset.pipeline.runner import run_batch

CATALOG = SubsetCatalog({"just-a": ["U+41"], "macron": ["U+100"], "cjk": ["U+4E00"]})


def request_for(*names: str) -> SubsetRequest:
    return SubsetRequest.from_names(names, CATALOG)


def test_subset_keeps_requested_codepoint(make_font, output_dir):
    """Test subsetting to U+41 keeps A and drops the rest."""
    source = make_font()
    backend = LibraryBackend(output_dir)

    result = backend.apply(source, request_for("just-a"), Flavor.WOFF2)

    assert result.status is Status.WRITTEN
    assert result.output_path == output_dir / "Test-Regular.woff2"

    original = TTFont(source)
    subsetted = TTFont(result.output_path)
    try:
        assert subsetted.flavor == "woff2"
        assert len(subsetted.getGlyphOrder()) <= len(original.getGlyphOrder())
        cmap = subsetted.getBestCmap()
        assert 0x41 in cmap
        assert 0x42 not in cmap
        assert 0x100 not in cmap
        assert ".notdef" in subsetted.getGlyphOrder()
    finally:
        original.close()
        subsetted.close()


def test_subset_ignores_requested_flavor(make_font, output_dir):
    """Test the library backend always writes WOFF2."""
    source = make_font()
    result = LibraryBackend(output_dir).apply(source, request_for("just-a"), Flavor.WOFF)

    assert result.output_path.suffix == ".woff2"
    with TTFont(result.output_path) as font:
        assert font.flavor == "woff2"


def test_subset_no_matching_codepoints_keeps_notdef(make_font, output_dir):
    """Test a font without any requested codepoint still yields a .notdef font."""
    source = make_font()
    result = LibraryBackend(output_dir).apply(source, request_for("cjk"), Flavor.WOFF2)

    assert result.status is Status.WRITTEN
    with TTFont(result.output_path) as font:
        assert font.getGlyphOrder() == [".notdef"]
        assert not font.getBestCmap()


def test_compression_failure_is_skipped(make_font, output_dir, monkeypatch):
    """Test a failing WOFF2 save skips the file without writing output."""

    def failing_compress(font, flavor):
        raise RuntimeError("brotli unavailable")

    monkeypatch.setattr(library, "compress_font", failing_compress)
    source = make_font()

    result = LibraryBackend(output_dir).apply(source, request_for("just-a"), Flavor.WOFF2)

    assert result.status is Status.SKIPPED
    assert "brotli unavailable" in result.reason
    assert not (output_dir / "Test-Regular.woff2").exists()


def test_malformed_font_is_skipped(input_dir, output_dir):
    """Test unparsable input is skipped rather than aborting."""
    broken = input_dir / "Broken.ttf"
    broken.write_bytes(b"\x00\x01\x00\x00garbage")

    result = LibraryBackend(output_dir).apply(broken, request_for("just-a"), Flavor.WOFF2)

    assert result.status is Status.SKIPPED
    assert "Broken.ttf" in result.reason


def test_batch_with_one_malformed_font(make_font, input_dir, output_dir):
    """Test N-1 outputs are written when one of N inputs is malformed."""
    for i in range(4):
        make_font(f"Good{i}.ttf")
    (input_dir / "Bad.otf").write_bytes(b"not a font")

    files = discover_fonts(input_dir)
    summary = run_batch(
        files,
        input_dir,
        LibraryBackend(output_dir),
        request_for("just-a", "macron"),
        Flavor.WOFF2,
        jobs=3,
        show_progress=False,
    )

    assert summary.total == 5
    assert summary.written == 4
    assert summary.skipped == 1
    assert summary.fatal is None
    assert sorted(p.name for p in output_dir.iterdir()) == [
        f"Good{i}.woff2" for i in range(4)
    ]


def test_woff2_input_is_accepted(make_font, input_dir, output_dir):
    """Test web font inputs can be subsetted again."""
    source = make_font()
    with TTFont(source) as font:
        font.flavor = "woff2"
        font.save(input_dir / "Web.woff2")

    result = LibraryBackend(output_dir).apply(
        input_dir / "Web.woff2", request_for("macron"), Flavor.WOFF2
    )

    assert result.status is Status.WRITTEN
    with TTFont(result.output_path) as font:
        assert set(font.getBestCmap()) == {0x100}


def test_output_is_overwritten(make_font, output_dir):
    """Test an existing output file is replaced."""
    source = make_font()
    output_dir.mkdir()
    stale = output_dir / "Test-Regular.woff2"
    stale.write_bytes(b"stale")

    LibraryBackend(output_dir).apply(source, request_for("just-a"), Flavor.WOFF2)

    assert stale.read_bytes()[:4] == b"wOF2"
