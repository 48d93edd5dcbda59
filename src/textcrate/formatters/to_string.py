"""Formatter of last resort.

Python 3.13+. Zero external dependencies.
"""

from textcrate.constants import FALLBACK_TO_STRING

from .base import StatelessFormatter, render_arguments

__all__ = ["ToStringFormatter"]


class ToStringFormatter(StatelessFormatter):
    """Renders the raw pattern and the argument list without applying one to the other.

    Should be used when the formatting rules are unknown or have failed.
    Never raises, and accepts every pattern during validation.

    Example:
        >>> ToStringFormatter().format("P", 1, "2")
        "Pattern: 'P'. Arguments: [1, 2]"
    """

    __slots__ = ()

    def format(self, pattern: str | None, /, *arguments: object) -> str:
        return FALLBACK_TO_STRING.format(pattern=pattern, arguments=render_arguments(arguments))

    def validate(self, pattern: str | None, /, *argument_types: object) -> None:
        """Accept everything."""
