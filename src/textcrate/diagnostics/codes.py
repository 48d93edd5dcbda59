"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Pattern errors (validation of message patterns)
        2000-2999: Configuration errors (repository and formatter setup)
        3000-3999: Dispatch errors (call site resolution)
    """

    # Pattern errors (1000-1999)
    PATTERN_EMPTY = 1001
    PATTERN_TOO_GENERIC = 1002
    PLACEHOLDER_COUNT_MISMATCH = 1003

    # Configuration errors (2000-2999)
    REQUIRED_INPUT_MISSING = 2001
    FORMATTER_NOT_FOUND = 2002
    FORMATTER_NOT_INSTANTIABLE = 2003
    DUPLICATE_MESSAGE_ID = 2004
    DUPLICATE_CALL_SITE = 2005
    INVALID_DECLARATION = 2006

    # Dispatch errors (3000-3999)
    UNSUPPORTED_RETURN_TYPE = 3001
    CALL_SITE_NOT_FOUND = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        subject: Repository, call site or formatter the error is about
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    subject: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[PLACEHOLDER_COUNT_MISMATCH]: Parameter count 2 does not match the pattern: 1
              --> app.Messages#hello
              = help: Add or remove placeholders so they match the parameters

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.subject is not None:
            lines.append(f"  --> {self.subject}")
        if self.hint is not None:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
