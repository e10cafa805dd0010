"""
Custom exception classes for describe-action.

Loading failures are the only errors the tool defines; rendering has no
failure modes of its own.
"""

from pathlib import Path
from typing import Optional, Union


class DescribeActionException(Exception):
    """Base exception class for all describe-action exceptions."""

    pass


class ManifestError(DescribeActionException):
    """
    Raised when a manifest cannot be turned into a Manifest model.

    Carries the offending path (when known) so the CLI can print a single
    diagnostic line.

    Example:
        >>> raise ManifestError(reason="not a mapping", path="action.yml")
    """

    def __init__(self, reason: str, path: Optional[Union[str, Path]] = None):
        self.reason = reason
        self.path = str(path) if path is not None else None
        message = reason if self.path is None else f"{self.path}: {reason}"
        super().__init__(message)


class ManifestNotFoundError(ManifestError):
    """Raised when the manifest file does not exist or cannot be read."""

    pass


class ManifestParseError(ManifestError):
    """Raised when the manifest is not valid YAML or does not match the model."""

    pass
