"""
Font inspection.

Prints basic metadata for every font in the input directory.
"""

import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import click
from fontTools.ttLib import TTFont

from webfont_subset.config.paths import INPUT_DIR
from webfont_subset.core.errors import MalformedFontError
from webfont_subset.core.font_io import discover_fonts, load_font
from webfont_subset.utils.logging import logger

# Name table IDs
NAME_ID_FULL_NAME = 4
NAME_ID_POSTSCRIPT_NAME = 6

# OS/2 fsSelection bits
FS_ITALIC = 1 << 0
FS_BOLD = 1 << 5
FS_REGULAR = 1 << 6
FS_OBLIQUE = 1 << 9

SEPARATOR = "———"


def get_font_features(font: TTFont) -> list[str]:
    """Sorted, deduplicated GSUB and GPOS feature tags."""
    features = set()
    for tag in ("GPOS", "GSUB"):
        if tag not in font:
            continue
        feature_list = font[tag].table.FeatureList
        if feature_list is None:
            continue
        features.update(record.FeatureTag for record in feature_list.FeatureRecord)
    return sorted(features)


def get_font_full_names(font: TTFont) -> list[str]:
    """Unicode full-name records with their language IDs."""
    if "name" not in font:
        return []
    return [
        f"{record.toUnicode()} (lang 0x{record.langID:04X})"
        for record in font["name"].names
        if record.nameID == NAME_ID_FULL_NAME and record.isUnicode()
    ]


def get_font_ps_name(font: TTFont) -> str:
    if "name" not in font:
        return "<none>"
    for record in font["name"].names:
        if record.nameID == NAME_ID_POSTSCRIPT_NAME and record.isUnicode():
            return record.toUnicode()
    return "<none>"


def get_style_flags(font: TTFont) -> dict[str, bool]:
    selection = font["OS/2"].fsSelection if "OS/2" in font else 0
    return {
        "Regular": bool(selection & FS_REGULAR),
        "Italic": bool(selection & FS_ITALIC),
        "Bold": bool(selection & FS_BOLD),
        "Oblique": bool(selection & FS_OBLIQUE),
    }


def describe_font(font: TTFont) -> str:
    """Render a human-readable metadata report for one font."""
    lines = [
        f"PostScript name: {get_font_ps_name(font)}",
        f"Family names: {', '.join(get_font_full_names(font))}",
        SEPARATOR,
        f"Features: {', '.join(get_font_features(font))}",
        f"Glyphs: {len(font.getGlyphOrder())}",
        SEPARATOR,
    ]
    lines.extend(f"{name}: {value}" for name, value in get_style_flags(font).items())
    lines.append(SEPARATOR)

    is_variable = "fvar" in font
    lines.append(f"Variable: {is_variable}")
    if is_variable:
        lines.append("Variation axes:")
        for axis in font["fvar"].axes:
            lines.append(
                f"  - {axis.axisTag} {axis.minValue:g}..{axis.maxValue:g}, "
                f"default {axis.defaultValue:g}"
            )
    return "\n".join(lines)


def inspect_font(path: Path) -> str | None:
    """Build the report for one file, or None if it cannot be parsed."""
    try:
        font = load_font(path)
    except MalformedFontError as e:
        logger.error(str(e))
        return None
    with font:
        try:
            return f"{path.name}\n{describe_font(font)}\n"
        except Exception as e:
            logger.error(f"Cannot inspect {path.name}: {e}")
            return None


def inspect_fonts(input_dir: Path = INPUT_DIR, jobs: int | None = None) -> None:
    """Print metadata for every font in input_dir."""
    try:
        filenames = discover_fonts(input_dir)
    except FileNotFoundError as e:
        logger.error(str(e))
        sys.exit(1)

    if not filenames:
        logger.warning(f"No font files found in {input_dir}/")
        return

    with ThreadPoolExecutor(max_workers=jobs) as executor:
        for report in executor.map(inspect_font, (input_dir / f for f in filenames)):
            if report is not None:
                click.echo(report)
