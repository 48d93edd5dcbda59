"""Placeholder scanning for SLF4J-style patterns.

A placeholder is the two-character token ``{}``. A run of backslashes
directly in front of it decides its meaning:

    - odd run: the placeholder is escaped and rendered literally
    - even run (including none): the placeholder is substituted

In both cases every pair of backslashes in the run collapses to a single
literal backslash. Backslashes that do not precede ``{}`` are literal.

Scanning is left to right and non-overlapping.

Python 3.13+. Zero external dependencies.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass

from textcrate.constants import ESCAPE_CHAR, PLACEHOLDER

__all__ = [
    "PlaceholderToken",
    "count_placeholders",
    "scan_placeholders",
    "substitute",
]

# Run of escape characters followed by the placeholder token.
_PLACEHOLDER_PATTERN: re.Pattern[str] = re.compile(
    "(" + re.escape(ESCAPE_CHAR) + "*)" + re.escape(PLACEHOLDER)
)


@dataclass(frozen=True, slots=True)
class PlaceholderToken:
    """One ``{}`` occurrence together with the escapes in front of it.

    Attributes:
        start: Offset of the first escape character (or of ``{`` if none)
        end: Offset just past ``}``
        escapes: Number of escape characters directly before ``{}``
    """

    start: int
    end: int
    escapes: int

    @property
    def is_escaped(self) -> bool:
        """True when the placeholder is rendered literally."""
        return self.escapes % 2 == 1

    @property
    def literal_prefix(self) -> str:
        """Escape characters that survive in the output."""
        return ESCAPE_CHAR * (self.escapes // 2)


def scan_placeholders(pattern: str) -> Iterator[PlaceholderToken]:
    """Yield every ``{}`` token of a pattern, escaped or not.

    Args:
        pattern: Formatting pattern

    Yields:
        PlaceholderToken for each occurrence, left to right
    """
    for match in _PLACEHOLDER_PATTERN.finditer(pattern):
        yield PlaceholderToken(
            start=match.start(),
            end=match.end(),
            escapes=len(match.group(1)),
        )


def count_placeholders(pattern: str) -> int:
    """Count unescaped placeholders.

    Example:
        >>> count_placeholders("{} and {}")
        2
        >>> count_placeholders("not a placeholder: \\\\{}")
        0
        >>> count_placeholders("a placeholder: \\\\\\\\{}")
        1
    """
    return sum(1 for token in scan_placeholders(pattern) if not token.is_escaped)


def substitute(pattern: str, arguments: tuple[object, ...]) -> str:
    """Replace unescaped placeholders with the string form of arguments.

    Extra arguments are ignored. Placeholders left without an argument
    stay in the output as a literal ``{}``.

    Args:
        pattern: Formatting pattern
        arguments: Positional arguments

    Returns:
        Formatted text
    """
    parts: list[str] = []
    position = 0
    next_argument = 0

    for token in scan_placeholders(pattern):
        parts.append(pattern[position : token.start])
        parts.append(token.literal_prefix)
        if token.is_escaped or next_argument >= len(arguments):
            parts.append(PLACEHOLDER)
        else:
            parts.append(str(arguments[next_argument]))
            next_argument += 1
        position = token.end

    parts.append(pattern[position:])
    return "".join(parts)
