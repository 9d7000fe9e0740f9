"""
Error types raised by screengen.
Every error is fatal for a run and propagates to the caller.
"""
from typing import Optional


class ScreengenError(Exception):
    """Base class for all screengen errors."""


class OpenError(ScreengenError):
    """Source video is unreadable or not a recognized format."""


class ExtractionError(ScreengenError):
    """A frame could not be produced at the requested timestamp."""

    def __init__(self, message: str, timestamp: Optional[int] = None):
        super().__init__(message)
        self.timestamp = timestamp


class EncodingError(ScreengenError):
    """A thumbnail could not be written to its temporary file."""


class CompositionError(ScreengenError):
    """The external compositor failed to start or exited with an error."""

    def __init__(
        self,
        message: str,
        returncode: Optional[int] = None,
        stderr: str = ""
    ):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class StatError(ScreengenError):
    """The source file could not be stat'ed for size reporting."""
