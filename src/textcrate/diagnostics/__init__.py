"""Diagnostic system for textcrate errors.

Provides structured error diagnostics with codes and hints, the exception
hierarchy, and repository validation results.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import ConfigurationError, InvalidPatternError, TextCrateError
from .templates import ErrorTemplate
from .validation import PatternProblem, ValidationResult, ValidationWarning

__all__ = [
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "InvalidPatternError",
    "PatternProblem",
    "TextCrateError",
    "ValidationResult",
    "ValidationWarning",
]
