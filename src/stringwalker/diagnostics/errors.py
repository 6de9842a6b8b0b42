"""Walker exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Each concrete error also derives from the closest built-in exception so
callers that only know the standard library can still catch it.
"""

from .codes import Diagnostic


class StringWalkerError(Exception):
    """Base exception for all walker errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize StringWalkerError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidArgumentError(StringWalkerError, ValueError):
    """A search or consume target was not a single character.

    Raised at the call site before any scanning happens; the cursor
    position is never affected.
    """


class OutOfRangeError(StringWalkerError, IndexError):
    """A move or extraction boundary falls outside [0, length].

    The cursor position is left unchanged. Parsers commonly treat this as
    "stop scanning".
    """


class InvalidRangeError(StringWalkerError, ValueError):
    """An extraction range is malformed (start greater than end).

    Distinct from OutOfRangeError: the range is wrong regardless of the
    buffer length.
    """
