"""Diagnostic system for walker errors.

Provides structured error diagnostics with codes, offsets and hints.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    InvalidArgumentError,
    InvalidRangeError,
    OutOfRangeError,
    StringWalkerError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidArgumentError",
    "InvalidRangeError",
    "OutOfRangeError",
    "OutputFormat",
    "StringWalkerError",
]
