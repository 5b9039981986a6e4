"""
Exception types raised while preparing and running a subsetting batch.
"""


class SubsetterError(Exception):
    """Base class for all subsetting errors."""


class ConfigurationError(SubsetterError):
    """Invalid subset configuration, e.g. a malformed Unicode range token."""


class MalformedFontError(SubsetterError):
    """Input bytes could not be parsed as a font."""


class ExternalToolError(SubsetterError):
    """External subsetting tool could not be started or exited non-zero."""

    def __init__(self, message: str, returncode: int | None = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
