"""textcrate exception hierarchy with structured diagnostics.

Only expected, typed domain errors cross the library boundary. Unexpected
failures inside formatters are absorbed by ResilientFormatter and never
surface as exceptions.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ConfigurationError",
    "InvalidPatternError",
    "TextCrateError",
]


class TextCrateError(Exception):
    """Base exception for all textcrate errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TextCrateError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidPatternError(TextCrateError):
    """Pattern rejected by a validator.

    Raised for empty or too generic patterns and for placeholder counts
    that do not match the parameter types. This is a legitimate validation
    outcome, never an infrastructure failure, so ResilientFormatter
    re-raises it instead of falling back.
    """


class ConfigurationError(TextCrateError):
    """Repository, formatter or call site set up incorrectly.

    Examples:
    - Missing repository or message specification
    - Unknown formatter name in the registry
    - Call site declaring a return type other than Message or str
    - Duplicate message ids in one repository

    Surfaced immediately, never retried.
    """
