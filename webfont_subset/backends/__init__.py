"""
Subsetting backends.
"""

from pathlib import Path

from webfont_subset.backends.base import Status, SubsetBackend, SubsetResult
from webfont_subset.backends.external import ExternalBackend
from webfont_subset.backends.library import LibraryBackend
from webfont_subset.config.options import DEFAULT_EXECUTABLE, BackendChoice

__all__ = [
    "ExternalBackend",
    "LibraryBackend",
    "Status",
    "SubsetBackend",
    "SubsetResult",
    "create_backend",
]


def create_backend(
    choice: BackendChoice,
    output_dir: Path,
    *,
    executable: str = DEFAULT_EXECUTABLE,
) -> SubsetBackend:
    """Instantiate the backend selected for this run."""
    if choice is BackendChoice.PYFTSUBSET:
        return ExternalBackend(output_dir, executable=executable)
    return LibraryBackend(output_dir)
