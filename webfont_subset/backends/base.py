"""
Common interface for subsetting backends.

A backend subsets one input font into one output file and reports what
happened as a ``SubsetResult``. Whether a failure skips the file or stops the
whole batch is decided by the backend through the result status.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from webfont_subset.config.options import Flavor
from webfont_subset.core.catalog import SubsetRequest
from webfont_subset.core.font_io import output_path_for


class Status(Enum):
    """Outcome of subsetting a single file."""

    WRITTEN = "written"
    SKIPPED = "skipped"
    FATAL = "fatal"


@dataclass(frozen=True)
class SubsetResult:
    """Tagged per-file outcome."""

    status: Status
    input_path: Path
    output_path: Path | None = None
    reason: str | None = None

    @classmethod
    def written(cls, input_path: Path, output_path: Path) -> "SubsetResult":
        return cls(Status.WRITTEN, input_path, output_path)

    @classmethod
    def skipped(cls, input_path: Path, reason: str) -> "SubsetResult":
        return cls(Status.SKIPPED, input_path, reason=reason)

    @classmethod
    def fatal(cls, input_path: Path, reason: str) -> "SubsetResult":
        return cls(Status.FATAL, input_path, reason=reason)

    @property
    def is_fatal(self) -> bool:
        return self.status is Status.FATAL


class SubsetBackend(ABC):
    """Subsetting strategy applied to every file of a batch."""

    name: str = ""
    # Whether the requested flavor controls the container that gets written
    supports_flavor: bool = False
    # Severity of an exception escaping apply()
    error_status: Status = Status.SKIPPED

    def __init__(self, output_dir: Path):
        self.output_dir = output_dir

    def output_flavor(self, flavor: Flavor) -> Flavor:
        """Flavor that names the output file for a requested flavor."""
        return flavor

    def output_path(self, input_path: Path, flavor: Flavor) -> Path:
        return output_path_for(
            input_path, self.output_dir, self.output_flavor(flavor).extension
        )

    def on_error(self, input_path: Path, error: Exception) -> SubsetResult:
        """Turn an unexpected exception into a result with this backend's severity."""
        return SubsetResult(
            self.error_status, input_path, reason=f"{type(error).__name__}: {error}"
        )

    @abstractmethod
    def apply(
        self, input_path: Path, request: SubsetRequest, flavor: Flavor
    ) -> SubsetResult:
        """
        Subset one font.

        Args:
            input_path: Font to subset (read-only)
            request: Validated codepoint selection
            flavor: Requested output flavor

        Returns:
            Result tagged WRITTEN, SKIPPED or FATAL
        """
