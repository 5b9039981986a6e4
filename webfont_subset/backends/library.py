"""
In-process subsetting with fontTools.

Parses the font, keeps only the requested codepoints with
``fontTools.subset.Subsetter`` and writes the result as WOFF2. Any problem
with a single font skips that font; the batch carries on.
"""

from io import BytesIO
from pathlib import Path

from fontTools.subset import Options, Subsetter
from fontTools.ttLib import TTFont

from webfont_subset.backends.base import SubsetBackend, SubsetResult
from webfont_subset.config.options import LIBRARY_FLAVOR, Flavor
from webfont_subset.core.catalog import SubsetRequest
from webfont_subset.core.errors import MalformedFontError
from webfont_subset.core.font_io import load_font


def subset_font(font: TTFont, codepoints: frozenset[int]) -> None:
    """
    Subset a font in place to the given codepoints.

    fontTools always keeps .notdef, so a font with none of the codepoints
    still subsets to a .notdef-only font.
    """
    options = Options()
    subsetter = Subsetter(options=options)
    subsetter.populate(unicodes=codepoints)
    subsetter.subset(font)


def compress_font(font: TTFont, flavor: Flavor) -> bytes:
    """Serialize a font into a WOFF or WOFF2 container."""
    font.flavor = flavor.value
    buffer = BytesIO()
    font.save(buffer)
    return buffer.getvalue()


class LibraryBackend(SubsetBackend):
    """fontTools subsetter running inside the worker thread."""

    name = "library"
    supports_flavor = False

    def output_flavor(self, flavor: Flavor) -> Flavor:
        return LIBRARY_FLAVOR

    def apply(
        self, input_path: Path, request: SubsetRequest, flavor: Flavor
    ) -> SubsetResult:
        try:
            font = load_font(input_path)
        except MalformedFontError as e:
            return SubsetResult.skipped(input_path, str(e))

        with font:
            try:
                subset_font(font, request.codepoints)
            except Exception as e:
                return SubsetResult.skipped(input_path, f"subsetting failed: {e}")

            try:
                data = compress_font(font, LIBRARY_FLAVOR)
            except Exception as e:
                return SubsetResult.skipped(input_path, f"compression failed: {e}")

        output = self.output_path(input_path, flavor)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(data)
        return SubsetResult.written(input_path, output)
