"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by every
exception the walker raises.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Argument errors (malformed search or consume targets)
        2000-2999: Range errors (cursor moves and extraction bounds)
    """

    # Argument errors (1000-1999)
    INVALID_ARGUMENT = 1001

    # Range errors (2000-2999)
    OUT_OF_RANGE = 2001
    INVALID_RANGE = 2002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans and tools. Produced by
    ErrorTemplate and attached to StringWalkerError instances.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        position: Offset in the buffer the error refers to (None if not applicable)
        hint: Suggestion for fixing the error
        operation: Walker operation that failed (e.g. "move_by")
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    position: int | None = None
    hint: str | None = None
    operation: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in the default (Rust compiler) style.

        Example output:
            error[OUT_OF_RANGE]: Position -1 is less than zero
              --> move_to, offset -1
              = help: Keep the cursor within [0, length]

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
