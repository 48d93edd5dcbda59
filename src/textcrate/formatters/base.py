"""Formatter and Validator contracts.

A Formatter turns a pattern and positional arguments into text. It may
raise on malformed input; callers that need resilience wrap it in a
ResilientFormatter. A Formatter may additionally be a Validator, which
checks a pattern against the types of the arguments it will receive.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

__all__ = [
    "Formatter",
    "StatelessFormatter",
    "Validator",
    "render_arguments",
    "validator_of",
]


@runtime_checkable
class Formatter(Protocol):
    """Protocol for message formatters.

    Implementations must be safe to share between threads: a repository
    uses one formatter instance for every message it declares.
    """

    def format(self, pattern: str | None, /, *arguments: object) -> str:
        """Apply arguments to a pattern.

        Args:
            pattern: Formatting pattern
            *arguments: Positional message arguments

        Returns:
            Resulting text
        """
        ...  # pragma: no cover  # Protocol stub - not executable


@runtime_checkable
class Validator(Protocol):
    """Protocol for pattern validation.

    Can be used by tooling (linters, code generators) to ensure message
    patterns match the parameters of their call sites.
    """

    def validate(self, pattern: str | None, /, *argument_types: object) -> None:
        """Validate a pattern against the parameter types of a call site.

        Args:
            pattern: Formatting pattern
            *argument_types: Types of the arguments the pattern will receive

        Raises:
            InvalidPatternError: If the pattern is malformed or does not match
        """
        ...  # pragma: no cover  # Protocol stub - not executable


def validator_of(formatter: object) -> Validator | None:
    """Return the validation capability of a formatter, if it has one.

    Args:
        formatter: Any formatter

    Returns:
        The formatter itself when it is also a Validator, else None
    """
    if isinstance(formatter, Validator):
        return formatter
    return None


def render_arguments(arguments: Iterable[object] | None) -> str:
    """Render an argument list for diagnostic output.

    An argument whose ``__str__`` raises is shown as ``<unprintable T>``,
    so the result is always produced.

    Example:
        >>> render_arguments(["a", 1, None])
        '[a, 1, None]'
        >>> render_arguments(None)
        '[]'
    """
    if arguments is None:
        return "[]"
    return "[" + ", ".join(_safe_str(argument) for argument in arguments) + "]"


def _safe_str(argument: object) -> str:
    try:
        return str(argument)
    except Exception:  # pylint: disable=broad-exception-caught
        # Arbitrary user __str__ can raise anything
        return f"<unprintable {type(argument).__name__}>"


class StatelessFormatter:
    """Base class for formatters without internal state.

    Two instances of the same concrete class are interchangeable, so
    equality and hashing are based on the type alone.
    """

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return self is other or type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
