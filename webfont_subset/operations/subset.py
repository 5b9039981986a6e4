"""
Font subsetting operations.

Subsets every font in the input directory to the requested named subsets.
"""

import sys
from collections.abc import Iterable
from pathlib import Path

from webfont_subset.backends import create_backend
from webfont_subset.backends.external import warn_flavor_mismatch
from webfont_subset.config.options import (
    DEFAULT_BACKEND,
    DEFAULT_EXECUTABLE,
    DEFAULT_FLAVOR,
    BackendChoice,
    Flavor,
)
from webfont_subset.config.paths import INPUT_DIR, OUTPUT_DIR
from webfont_subset.core.catalog import DEFAULT_CATALOG, SubsetCatalog, SubsetRequest
from webfont_subset.core.errors import ConfigurationError
from webfont_subset.core.font_io import discover_fonts
from webfont_subset.pipeline.runner import BatchSummary, run_batch
from webfont_subset.utils.logging import logger


def build_request(
    subsets: Iterable[str], catalog: SubsetCatalog = DEFAULT_CATALOG
) -> SubsetRequest:
    """
    Resolve subset names, exiting on a malformed range token.
    """
    try:
        request = SubsetRequest.from_names(subsets, catalog)
    except ConfigurationError as e:
        logger.error(str(e))
        sys.exit(1)

    unknown = [name for name in request.names if catalog.tokens(name) is None]
    if unknown:
        logger.debug(f"Ignoring unknown subsets: {', '.join(unknown)}")
    if request.is_empty:
        logger.warning("None of the requested subsets are known")
    else:
        logger.info(
            f"Subsets: {', '.join(request.names)} "
            f"({len(request.codepoints)} codepoints)"
        )
    return request


def subset_fonts(
    subsets: Iterable[str],
    *,
    backend: BackendChoice = DEFAULT_BACKEND,
    flavor: Flavor = DEFAULT_FLAVOR,
    input_dir: Path = INPUT_DIR,
    output_dir: Path = OUTPUT_DIR,
    jobs: int | None = None,
    executable: str = DEFAULT_EXECUTABLE,
    show_progress: bool = True,
    catalog: SubsetCatalog = DEFAULT_CATALOG,
) -> BatchSummary:
    """
    Subset all fonts in input_dir and write web fonts to output_dir.

    The selection is validated before any font is touched. Exits with status 1
    if the input directory is missing, a range token is malformed, or the
    backend reports a fatal failure.
    """
    try:
        filenames = discover_fonts(input_dir)
    except FileNotFoundError as e:
        logger.error(str(e))
        sys.exit(1)

    request = build_request(subsets, catalog)

    if not filenames:
        logger.warning(f"No font files found in {input_dir}/")
        return BatchSummary(total=0)

    subsetter = create_backend(backend, output_dir, executable=executable)
    if backend is BackendChoice.PYFTSUBSET:
        warn_flavor_mismatch(flavor)

    logger.info(f"Subsetting {len(filenames)} fonts with {subsetter.name}")
    summary = run_batch(
        filenames,
        input_dir,
        subsetter,
        request,
        flavor,
        jobs=jobs,
        show_progress=show_progress,
    )

    if summary.fatal is not None:
        logger.error(f"Aborted after failure on {summary.fatal.input_path.name}")
        sys.exit(1)
    return summary
