"""Validation result for message repository validation.

Python 3.13+.
"""

from dataclasses import dataclass

from .codes import DiagnosticCode

__all__ = [
    "PatternProblem",
    "ValidationResult",
    "ValidationWarning",
]


@dataclass(frozen=True, slots=True)
class PatternProblem:
    """Pattern rejected by the repository's formatter.

    Attributes:
        member: Call site name
        message_id: Declared message id
        pattern: The rejected pattern
        code: Diagnostic code of the rejection (None for plain-text errors)
        reason: Human-readable rejection message
    """

    member: str
    message_id: int
    pattern: str
    code: DiagnosticCode | None
    reason: str

    def format(self) -> str:
        """Format problem as human-readable string.

        Returns:
            One-line description naming the call site and the reason
        """
        label = self.code.name if self.code is not None else "INVALID_PATTERN"
        return f"[{label}] {self.member} (id {self.message_id}): {self.reason} ({self.pattern!r})"


@dataclass(frozen=True, slots=True)
class ValidationWarning:
    """Structured warning from repository validation.

    Attributes:
        member: Call site name
        message: Human-readable warning message
    """

    member: str
    message: str


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating every call site of a repository.

    Immutable result object for thread-safe validation feedback.

    Attributes:
        errors: Patterns rejected by the formatter
        warnings: Informational findings (call sites without a message)

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
        >>> result.error_count
        0
    """

    errors: tuple[PatternProblem, ...]
    warnings: tuple[ValidationWarning, ...]

    @property
    def is_valid(self) -> bool:
        """Check if validation passed. Warnings do not affect validity."""
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        """Number of rejected patterns."""
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        """Number of warnings."""
        return len(self.warnings)

    @staticmethod
    def valid() -> "ValidationResult":
        """Create a valid result with no errors or warnings.

        Returns:
            ValidationResult with empty tuples for all fields
        """
        return ValidationResult(errors=(), warnings=())
