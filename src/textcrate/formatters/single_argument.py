"""Formatter returning its first argument as-is.

Python 3.13+. Zero external dependencies.
"""

from .base import StatelessFormatter

__all__ = ["SingleArgumentFormatter"]


class SingleArgumentFormatter(StatelessFormatter):
    """Ignores the pattern and returns the string form of the first argument.

    Used for message codes when a repository declares no code format, so
    that the code is the bare message id. Must only be called with at least
    one argument: an empty argument list raises IndexError. Has no
    validator.
    """

    __slots__ = ()

    def format(self, pattern: str | None, /, *arguments: object) -> str:
        return str(arguments[0])
