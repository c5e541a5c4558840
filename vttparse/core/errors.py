"""
Exception hierarchy for WebVTT parsing.

Header, empty-input and read failures end a parse. Every other error belongs
to a single block: the scanner reports it for that block and moves on.
"""

from typing import Optional


class VTTError(Exception):
    """Base class for all WebVTT parsing errors."""
    pass


class ReadError(VTTError):
    """Raised when the underlying stream or file cannot be read."""
    pass


class EmptyInputError(VTTError):
    """Raised when the input contains no lines at all."""

    def __init__(self, message: str = "empty input"):
        super().__init__(message)


class MissingHeaderError(VTTError):
    """Raised when the first line does not start with WEBVTT."""

    def __init__(self, message: str = "missing WEBVTT header"):
        super().__init__(message)


class MissingTimestampLineError(VTTError):
    """Raised when a cue identifier is not followed by a timestamp line."""

    def __init__(self, message: str = "missing timestamp line"):
        super().__init__(message)


class InvalidTimestampLineError(VTTError):
    """Raised when a timestamp line has no '-->' separator."""

    def __init__(self, line: str = ""):
        self.line = line
        super().__init__(f"invalid timestamp line: {line!r}")


class MissingEndTimestampError(VTTError):
    """Raised when nothing follows the '-->' separator."""

    def __init__(self, line: str = ""):
        self.line = line
        super().__init__(f"missing end timestamp: {line!r}")


class InvalidTimestampFormatError(VTTError):
    """Raised when a timestamp has the wrong shape or non-digit content."""

    def __init__(self, timestamp: str, reason: str = "invalid timestamp format"):
        self.timestamp = timestamp
        self.reason = reason
        super().__init__(f"{reason}: {timestamp!r}")


class InvalidTimestampError(VTTError):
    """
    Raised when one side of a timestamp line fails to decode.

    Attributes:
        side: "start" or "end"
        cause: The underlying InvalidTimestampFormatError
    """

    side = ""

    def __init__(self, cause: Optional[InvalidTimestampFormatError] = None):
        self.cause = cause
        message = f"invalid {self.side} timestamp"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class InvalidStartTimestampError(InvalidTimestampError):
    """The start timestamp of a cue failed to decode."""
    side = "start"


class InvalidEndTimestampError(InvalidTimestampError):
    """The end timestamp of a cue failed to decode."""
    side = "end"
