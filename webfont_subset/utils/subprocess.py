"""
Subprocess execution utilities with consistent error handling.
"""

import subprocess
from pathlib import Path

from webfont_subset.config.options import DEFAULT_EXECUTABLE, EXTERNAL_TOOL_FLAVOR
from webfont_subset.core.errors import ExternalToolError
from webfont_subset.utils.logging import logger


def run_command(
    cmd: list[str],
    description: str | None = None,
) -> subprocess.CompletedProcess:
    """
    Run a subprocess command with consistent logging and error handling.

    Args:
        cmd: Command and arguments to run
        description: Optional description for logging

    Returns:
        CompletedProcess result

    Raises:
        ExternalToolError: If the command cannot be started or exits non-zero
    """
    if description:
        logger.debug(description)

    try:
        result = subprocess.run(cmd, check=True, capture_output=True, text=True)
    except OSError as e:
        raise ExternalToolError(f"Cannot run {cmd[0]}: {e}") from e
    except subprocess.CalledProcessError as e:
        logger.debug(f"Command failed: {' '.join(cmd)}")
        raise ExternalToolError(
            f"{cmd[0]} exited with status {e.returncode}",
            returncode=e.returncode,
            stderr=e.stderr or "",
        ) from e

    if result.stdout:
        logger.debug(result.stdout)
    return result


def build_pyftsubset_command(
    input_font: Path,
    output_file: Path,
    unicodes: str,
    *,
    executable: str = DEFAULT_EXECUTABLE,
) -> list[str]:
    """
    Build the pyftsubset command line.

    Args:
        input_font: Input font path
        output_file: Output file path
        unicodes: Comma-separated Unicode ranges
        executable: pyftsubset executable name or path
    """
    return [
        executable,
        str(input_font),
        f"--unicodes={unicodes}",
        f"--output-file={output_file}",
        f"--flavor={EXTERNAL_TOOL_FLAVOR.value}",
    ]


def run_pyftsubset(
    input_font: Path,
    output_file: Path,
    unicodes: str,
    *,
    executable: str = DEFAULT_EXECUTABLE,
) -> subprocess.CompletedProcess:
    """
    Run pyftsubset to subset a font.

    Raises:
        ExternalToolError: If pyftsubset is missing or fails
    """
    cmd = build_pyftsubset_command(
        input_font, output_file, unicodes, executable=executable
    )
    return run_command(cmd, f"Subsetting {input_font.name}")
