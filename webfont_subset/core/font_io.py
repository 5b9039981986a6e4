"""
Font I/O utilities for discovering, loading, and naming font files.
"""

from io import BytesIO
from pathlib import Path

from fontTools.ttLib import TTFont

from webfont_subset.config.paths import FONT_EXTENSIONS
from webfont_subset.core.errors import MalformedFontError


def is_font(path: Path) -> bool:
    """Check whether a path has a font file extension."""
    return path.suffix.lower().lstrip(".") in FONT_EXTENSIONS


def discover_fonts(directory: Path) -> list[str]:
    """
    List font file names in a directory, sorted by name.

    Args:
        directory: Directory to scan (not recursive)

    Returns:
        File names (not paths) of regular files with a font extension

    Raises:
        FileNotFoundError: If the directory does not exist
    """
    if not directory.is_dir():
        raise FileNotFoundError(f"Input directory not found: {directory}")
    return sorted(
        entry.name for entry in directory.iterdir() if entry.is_file() and is_font(entry)
    )


def output_path_for(input_path: Path, output_dir: Path, extension: str) -> Path:
    """
    Map an input font to its output artifact path.

    The last suffix of the input name is replaced, so ``Foo.Bold.ttf`` with
    extension ``woff2`` becomes ``<output_dir>/Foo.Bold.woff2``.
    """
    return output_dir / Path(input_path.name).with_suffix(f".{extension}")


def load_font(path: Path) -> TTFont:
    """
    Read and parse a font file.

    Raises:
        MalformedFontError: If the file cannot be read or parsed as a font
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise MalformedFontError(f"Cannot read {path.name}: {e}") from e

    try:
        font = TTFont(BytesIO(data))
        # Decompression errors (brotli, zlib) and table errors all surface here
        font.getGlyphOrder()
        font.getBestCmap()
    except Exception as e:
        raise MalformedFontError(f"Cannot parse {path.name}: {e}") from e
    return font
