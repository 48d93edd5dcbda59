"""Default pattern formatter with SLF4J-style ``{}`` placeholders.

Python 3.13+. Zero external dependencies.
"""

from textcrate.constants import PLACEHOLDER
from textcrate.diagnostics import ErrorTemplate, InvalidPatternError

from .base import StatelessFormatter
from .placeholders import count_placeholders, substitute

__all__ = ["PatternFormatter"]


class PatternFormatter(StatelessFormatter):
    """Substitutes ``{}`` placeholders with positional arguments.

    Follows the SLF4J conventions: arguments are inserted in order using
    their string form, extra arguments are ignored, and placeholders
    without an argument stay literal. See textcrate.formatters.placeholders
    for the escaping rules.

    Also validates patterns: a pattern must not be blank, must not consist
    of a lone placeholder, and must contain exactly one unescaped
    placeholder per parameter.

    Example:
        >>> PatternFormatter().format("Hello, {}!", "world")
        'Hello, world!'
        >>> PatternFormatter().format("\\\\{}", "world")
        '{}'
    """

    __slots__ = ()

    def format(self, pattern: str | None, /, *arguments: object) -> str:
        if pattern is None:
            msg = "Pattern cannot be None"
            raise TypeError(msg)
        return substitute(pattern, arguments)

    def validate(self, pattern: str | None, /, *argument_types: object) -> None:
        if pattern is None or not pattern.strip():
            raise InvalidPatternError(ErrorTemplate.pattern_empty())

        if pattern.strip() == PLACEHOLDER:
            raise InvalidPatternError(ErrorTemplate.pattern_too_generic(pattern))

        parameter_count = len(argument_types)
        placeholder_count = count_placeholders(pattern)
        if parameter_count != placeholder_count:
            raise InvalidPatternError(
                ErrorTemplate.placeholder_count_mismatch(parameter_count, placeholder_count)
            )
