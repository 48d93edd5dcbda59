"""Formatter that never fails unexpectedly.

Failure handling rule:
    - A validator rejecting a pattern (InvalidPatternError) is a legitimate
      outcome and is re-raised as-is.
    - Any other exception from the delegate means the delegate is broken;
      it is logged and the fallback is used instead.

Python 3.13+. Zero external dependencies.
"""

import logging
from dataclasses import dataclass

from textcrate.diagnostics import InvalidPatternError

from .base import Formatter, validator_of

__all__ = ["ResilientFormatter"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResilientFormatter:
    """Makes best effort to return a meaningful message.

    Delegates to a primary formatter and falls back to a second one when
    the primary fails. The fallback is expected never to fail itself
    (ToStringFormatter is the usual choice).

    Attributes:
        delegate: Formatter tried first
        fallback: Formatter used when the delegate raises
    """

    delegate: Formatter
    fallback: Formatter

    def format(self, pattern: str | None, /, *arguments: object) -> str:
        try:
            return self.delegate.format(pattern, *arguments)
        except Exception:  # pylint: disable=broad-exception-caught
            logger.error(
                "Failed to format message using %r with pattern %r and arguments %r. "
                "Falling back to %r.",
                self.delegate,
                pattern,
                arguments,
                self.fallback,
                exc_info=True,
            )
            return self.fallback.format(pattern, *arguments)

    def validate(self, pattern: str | None, /, *argument_types: object) -> None:
        try:
            self._validate_with(self.delegate, pattern, argument_types)
        except InvalidPatternError:
            raise
        except Exception:  # pylint: disable=broad-exception-caught
            logger.error(
                "Failed to validate pattern %r with types %r using %r. Falling back to %r.",
                pattern,
                argument_types,
                self.delegate,
                self.fallback,
                exc_info=True,
            )
            self._validate_with(self.fallback, pattern, argument_types)

    @staticmethod
    def _validate_with(
        formatter: Formatter, pattern: str | None, argument_types: tuple[object, ...]
    ) -> None:
        validator = validator_of(formatter)
        if validator is not None:
            validator.validate(pattern, *argument_types)
