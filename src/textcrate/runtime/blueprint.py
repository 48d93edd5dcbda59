"""Message and code blueprints.

A blueprint is the immutable, cacheable part of a message: everything
needed to produce its text, code and properties except the arguments of
one particular call. Blueprints are built once per call site and shared
by every Message created from that call site.

Python 3.13+.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol

from textcrate.constants import FALLBACK_UNANNOTATED, UNANNOTATED_CODE
from textcrate.declaration import CallSite
from textcrate.diagnostics import ConfigurationError, ErrorTemplate
from textcrate.formatters import Formatter, render_arguments

__all__ = [
    "Blueprint",
    "CodeBlueprint",
    "CodeFormatting",
    "MessageBlueprint",
    "MessageFormatting",
    "UnannotatedBlueprint",
]


class Blueprint(Protocol):
    """What a Message needs from its blueprint."""

    @property
    def pattern(self) -> str:
        """Formatting pattern of the message."""
        ...  # pragma: no cover  # Protocol stub - not executable

    @property
    def code(self) -> str:
        """Message code."""
        ...  # pragma: no cover  # Protocol stub - not executable

    def format(self, arguments: Sequence[object] | None) -> str:
        """Message text for the given arguments."""
        ...  # pragma: no cover  # Protocol stub - not executable

    def get_property(self, name: str) -> str | None:
        """Property value, or None if undefined."""
        ...  # pragma: no cover  # Protocol stub - not executable


def _frozen_properties(properties: Mapping[str, str]) -> Mapping[str, str]:
    if isinstance(properties, MappingProxyType):
        return properties
    return MappingProxyType(dict(properties))


@dataclass(frozen=True, slots=True)
class CodeFormatting:
    """How the codes of a repository are formatted.

    Attributes:
        offset: Added to the message id
        pattern: Code pattern passed to the formatter
        formatter: Formatter receiving ``offset + id`` as its single argument
    """

    offset: int
    pattern: str
    formatter: Formatter


@dataclass(frozen=True, slots=True)
class CodeBlueprint:
    """Computes the code of one message on demand.

    Attributes:
        id: Message id
        formatting: Repository-wide code formatting
    """

    id: int
    formatting: CodeFormatting

    @property
    def offset(self) -> int:
        return self.formatting.offset

    @property
    def pattern(self) -> str:
        return self.formatting.pattern

    @property
    def formatter(self) -> Formatter:
        return self.formatting.formatter

    @property
    def code(self) -> str:
        """The formatted code: ``formatter.format(pattern, offset + id)``."""
        return self.formatting.formatter.format(
            self.formatting.pattern, self.formatting.offset + self.id
        )


@dataclass(frozen=True, slots=True)
class MessageFormatting:
    """Pattern of a message together with the formatter that applies it."""

    pattern: str
    formatter: Formatter


@dataclass(frozen=True, slots=True)
class MessageBlueprint:
    """Blueprint of a message declared with a message specification.

    Equal blueprints (same code blueprint, formatting and properties) are
    interchangeable. Properties do not take part in hashing.

    Attributes:
        code_blueprint: Computes the message code
        formatting: Message pattern and formatter
        properties: Read-only property mapping
    """

    code_blueprint: CodeBlueprint
    formatting: MessageFormatting
    properties: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    def __post_init__(self) -> None:
        # Frozen dataclass: bypass __setattr__ to store a private read-only copy
        object.__setattr__(self, "properties", _frozen_properties(self.properties))

    @property
    def pattern(self) -> str:
        return self.formatting.pattern

    @property
    def code(self) -> str:
        return self.code_blueprint.code

    def format(self, arguments: Sequence[object] | None) -> str:
        """Apply arguments to the pattern with the message formatter."""
        return self.formatting.formatter.format(self.formatting.pattern, *(arguments or ()))

    def get_property(self, name: str) -> str | None:
        return self.properties.get(name)


@dataclass(frozen=True, slots=True)
class UnannotatedBlueprint:
    """Best-effort blueprint for a call site declared without a message.

    Produces a message that names the call site and its arguments, so a
    forgotten declaration is visible in the output instead of failing the
    caller.

    Attributes:
        call_site: The undeclared call site
        properties: Properties of the enclosing repository
    """

    call_site: CallSite
    properties: Mapping[str, str] = field(hash=False)

    def __post_init__(self) -> None:
        """Validate inputs and freeze the properties.

        Raises:
            ConfigurationError: If call_site or properties is None
        """
        if self.call_site is None:
            raise ConfigurationError(ErrorTemplate.required_input_missing("Call site"))
        if self.properties is None:
            raise ConfigurationError(ErrorTemplate.required_input_missing("Properties"))
        object.__setattr__(self, "properties", _frozen_properties(self.properties))

    @property
    def pattern(self) -> str:
        return f"{self.call_site.declaring_type}:{self.call_site.member}"

    @property
    def code(self) -> str:
        return UNANNOTATED_CODE

    def format(self, arguments: Sequence[object] | None) -> str:
        return FALLBACK_UNANNOTATED.format(
            type_name=self.call_site.declaring_type,
            member=self.call_site.member,
            arguments=render_arguments(arguments),
        )

    def get_property(self, name: str) -> str | None:
        return self.properties.get(name)
