"""Formatter package.

Provides the Formatter/Validator contracts, the built-in formatters, the
ResilientFormatter wrapper and the formatter registry.

Python 3.13+. Zero external dependencies.
"""

from .base import Formatter, StatelessFormatter, Validator, render_arguments, validator_of
from .pattern import PatternFormatter
from .placeholders import count_placeholders
from .registry import (
    FormatterFactory,
    FormatterRegistry,
    FormatterSpec,
    create_default_registry,
    get_shared_registry,
)
from .resilient import ResilientFormatter
from .single_argument import SingleArgumentFormatter
from .to_string import ToStringFormatter

__all__ = [
    "Formatter",
    "FormatterFactory",
    "FormatterRegistry",
    "FormatterSpec",
    "PatternFormatter",
    "ResilientFormatter",
    "SingleArgumentFormatter",
    "StatelessFormatter",
    "ToStringFormatter",
    "Validator",
    "count_placeholders",
    "create_default_registry",
    "get_shared_registry",
    "render_arguments",
    "validator_of",
]
