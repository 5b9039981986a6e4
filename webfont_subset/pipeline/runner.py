"""
Batch orchestration.

Runs a subsetting backend over every discovered font on a thread pool and
collects the per-file results into a summary.
"""

import os
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path

from webfont_subset.backends.base import Status, SubsetBackend, SubsetResult
from webfont_subset.config.options import Flavor
from webfont_subset.core.catalog import SubsetRequest
from webfont_subset.pipeline.progress import BatchProgress
from webfont_subset.utils.logging import logger


@dataclass
class BatchSummary:
    """Results of one batch run."""

    total: int
    results: list[SubsetResult] = field(default_factory=list)
    fatal: SubsetResult | None = None

    @property
    def written(self) -> int:
        return sum(1 for r in self.results if r.status is Status.WRITTEN)

    @property
    def skipped(self) -> int:
        return sum(1 for r in self.results if r.status is Status.SKIPPED)

    @property
    def cancelled(self) -> int:
        """Files never attempted because the batch stopped early."""
        return self.total - len(self.results)


def default_jobs() -> int:
    return os.cpu_count() or 1


def _process_file(
    backend: SubsetBackend,
    input_dir: Path,
    filename: str,
    request: SubsetRequest,
    flavor: Flavor,
    progress: BatchProgress,
) -> SubsetResult:
    input_path = input_dir / filename
    progress.set_message(f"'{input_dir.name}/{filename}'")
    try:
        return backend.apply(input_path, request, flavor)
    except Exception as e:
        return backend.on_error(input_path, e)
    finally:
        progress.advance()


def _log_result(result: SubsetResult) -> None:
    name = result.input_path.name
    if result.status is Status.WRITTEN:
        logger.info(f"Created {result.output_path.name} from {name}")
    elif result.status is Status.SKIPPED:
        logger.warning(f"Skipped {name}: {result.reason}")
    else:
        logger.error(f"Failed to subset '{name}': {result.reason}")


def run_batch(
    filenames: list[str],
    input_dir: Path,
    backend: SubsetBackend,
    request: SubsetRequest,
    flavor: Flavor,
    *,
    jobs: int | None = None,
    show_progress: bool = True,
) -> BatchSummary:
    """
    Subset every file with the given backend.

    Files are processed concurrently in no particular order. A SKIPPED result
    only affects its own file. The first FATAL result cancels every file that
    has not started yet; files already running are allowed to finish.

    Args:
        filenames: Font file names inside input_dir
        input_dir: Directory holding the input fonts
        backend: Subsetting strategy for the run
        request: Validated codepoint selection
        flavor: Requested output flavor
        jobs: Worker thread count (defaults to the CPU count)
        show_progress: Whether to draw a progress bar

    Returns:
        Summary of all attempted files
    """
    summary = BatchSummary(total=len(filenames))
    if not filenames:
        return summary

    workers = max(1, jobs or default_jobs())
    logger.debug(f"Running {backend.name} backend with {workers} workers")

    with BatchProgress(len(filenames), enabled=show_progress) as progress:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures: list[Future] = [
                executor.submit(
                    _process_file,
                    backend,
                    input_dir,
                    filename,
                    request,
                    flavor,
                    progress,
                )
                for filename in filenames
            ]

            for future in as_completed(futures):
                if future.cancelled():
                    continue
                result = future.result()
                summary.results.append(result)
                _log_result(result)

                if result.is_fatal and summary.fatal is None:
                    summary.fatal = result
                    for pending in futures:
                        pending.cancel()

    logger.info(
        f"Font subsetting complete. {summary.written} written, "
        f"{summary.skipped} skipped"
        + (f", {summary.cancelled} not attempted" if summary.cancelled else "")
    )
    return summary
