"""
Subsetting through the external pyftsubset executable.

A failure to run the tool usually means it is missing from the environment,
so any failure here is fatal for the whole batch.
"""

from pathlib import Path

from webfont_subset.backends.base import Status, SubsetBackend, SubsetResult
from webfont_subset.config.options import (
    DEFAULT_EXECUTABLE,
    EXTERNAL_TOOL_FLAVOR,
    Flavor,
)
from webfont_subset.core.catalog import SubsetRequest
from webfont_subset.core.errors import ExternalToolError
from webfont_subset.core.ranges import format_ranges
from webfont_subset.utils.logging import logger
from webfont_subset.utils.subprocess import run_pyftsubset


class ExternalBackend(SubsetBackend):
    """Runs pyftsubset once per font."""

    name = "pyftsubset"
    supports_flavor = True
    error_status = Status.FATAL

    def __init__(self, output_dir: Path, executable: str = DEFAULT_EXECUTABLE):
        super().__init__(output_dir)
        self.executable = executable

    def apply(
        self, input_path: Path, request: SubsetRequest, flavor: Flavor
    ) -> SubsetResult:
        output = self.output_path(input_path, flavor)
        output.parent.mkdir(parents=True, exist_ok=True)
        unicodes = ",".join(format_ranges(request.codepoints, prefix=""))

        try:
            run_pyftsubset(
                input_path, output, unicodes, executable=self.executable
            )
        except ExternalToolError as e:
            if e.stderr:
                logger.error(e.stderr.strip())
            return SubsetResult.fatal(input_path, str(e))

        return SubsetResult.written(input_path, output)


def warn_flavor_mismatch(flavor: Flavor) -> None:
    """Log once per run when the file extension will not match its container."""
    if flavor is not EXTERNAL_TOOL_FLAVOR:
        logger.warning(
            f"{DEFAULT_EXECUTABLE} always writes {EXTERNAL_TOOL_FLAVOR.value}; "
            f"--flavor={flavor.value} only changes the output file extension"
        )
