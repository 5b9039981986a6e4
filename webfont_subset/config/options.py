"""
Run-wide option values: output flavors and subsetting backends.
"""

from enum import Enum


class Flavor(str, Enum):
    """Web font container written for each subsetted font."""

    WOFF = "woff"
    WOFF2 = "woff2"

    @property
    def extension(self) -> str:
        """Output file extension (without the dot)."""
        return self.value


class BackendChoice(str, Enum):
    """Subsetting engine used for a run."""

    LIBRARY = "library"  # fontTools.subset, in-process
    PYFTSUBSET = "pyftsubset"  # external pyftsubset executable


DEFAULT_FLAVOR = Flavor.WOFF2
DEFAULT_BACKEND = BackendChoice.LIBRARY

# The library backend always writes this container
LIBRARY_FLAVOR = Flavor.WOFF2

# Passed as --flavor to the external tool regardless of the requested flavor
EXTERNAL_TOOL_FLAVOR = Flavor.WOFF2
DEFAULT_EXECUTABLE = "pyftsubset"
