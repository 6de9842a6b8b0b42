"""Error message templates.

Centralized error message templates for testable, consistent error messages.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps raise sites short while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def invalid_target(operation: str, target: object) -> Diagnostic:
        """Search or consume target is not a single character or code.

        Args:
            operation: Walker method that received the target
            target: The offending value

        Returns:
            Diagnostic for INVALID_ARGUMENT
        """
        msg = f"{operation}() expects single characters, got {target!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_ARGUMENT,
            message=msg,
            hint="Pass a one-character string or an integer character code",
            operation=operation,
        )

    @staticmethod
    def start_before_zero(operation: str, position: int) -> Diagnostic:
        """Requested position lies before the start of the buffer.

        Args:
            operation: Walker method that was called
            position: The rejected position

        Returns:
            Diagnostic for OUT_OF_RANGE
        """
        msg = f"Start position {position} is less than zero"
        return Diagnostic(
            code=DiagnosticCode.OUT_OF_RANGE,
            message=msg,
            position=position,
            hint="Positions must be >= 0",
            operation=operation,
        )

    @staticmethod
    def end_after_length(operation: str, position: int, length: int) -> Diagnostic:
        """Requested position lies past the end of the buffer.

        Args:
            operation: Walker method that was called
            position: The rejected position
            length: Length of the buffer

        Returns:
            Diagnostic for OUT_OF_RANGE
        """
        msg = f"End position {position} is greater than the string length {length}"
        return Diagnostic(
            code=DiagnosticCode.OUT_OF_RANGE,
            message=msg,
            position=position,
            hint=f"Positions must be <= {length}",
            operation=operation,
        )

    @staticmethod
    def start_after_end(start: int, end: int) -> Diagnostic:
        """Extraction range has its start past its end.

        Args:
            start: Requested start offset
            end: Requested end offset

        Returns:
            Diagnostic for INVALID_RANGE
        """
        msg = f"Start ({start}) can not be greater than end ({end})"
        return Diagnostic(
            code=DiagnosticCode.INVALID_RANGE,
            message=msg,
            position=start,
            hint="Swap the arguments or check how the range was computed",
            operation="substring",
        )
