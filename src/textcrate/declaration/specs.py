"""Immutable message repository specifications.

These value objects are what the runtime consumes. They can be produced by
the fluent builder (textcrate.declaration.builder), by class decorators
(textcrate.declaration.decorators), or constructed directly.

Python 3.13+.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from textcrate.constants import MAX_MESSAGE_ID
from textcrate.diagnostics import ConfigurationError, ErrorTemplate
from textcrate.formatters import FormatterSpec

__all__ = [
    "CallSite",
    "CodeSpec",
    "MessageSpec",
    "PropertySpec",
    "RepositorySpec",
]


def _require_int(subject: str, value: object) -> None:
    # bool is an int subclass but never a meaningful id or offset
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigurationError(
            ErrorTemplate.invalid_declaration(subject, f"expected int, got {type(value).__name__}")
        )


def _require_str(subject: str, value: object) -> None:
    if not isinstance(value, str):
        raise ConfigurationError(
            ErrorTemplate.invalid_declaration(subject, f"expected str, got {type(value).__name__}")
        )


@dataclass(frozen=True, slots=True)
class MessageSpec:
    """Identifier and pattern of one message.

    Attributes:
        id: Message number, unique within its repository
        pattern: Text with ``{}`` placeholders
    """

    id: int
    pattern: str

    def __post_init__(self) -> None:
        """Validate field types.

        Raises:
            ConfigurationError: If id is not an int or pattern is not a str
        """
        _require_int("message id", self.id)
        if abs(self.id) > MAX_MESSAGE_ID:
            raise ConfigurationError(
                ErrorTemplate.invalid_declaration("message id", f"{self.id} is out of range")
            )
        _require_str("message pattern", self.pattern)


@dataclass(frozen=True, slots=True)
class CodeSpec:
    """Repository-wide message code format.

    The code of a message is its id plus the offset, formatted with the
    repository's message formatter using this pattern.

    Attributes:
        pattern: Code pattern, e.g. ``"[APP]:{}-code"``
        offset: Added to every message id
    """

    pattern: str
    offset: int = 0

    def __post_init__(self) -> None:
        """Validate field types.

        Raises:
            ConfigurationError: If pattern is not a str or offset is not an int
        """
        _require_str("code pattern", self.pattern)
        _require_int("code offset", self.offset)


@dataclass(frozen=True, slots=True)
class PropertySpec:
    """Named metadata value attached to every message of a repository."""

    name: str
    value: str

    def __post_init__(self) -> None:
        """Validate field types.

        Raises:
            ConfigurationError: If name or value is not a str
        """
        _require_str("property name", self.name)
        _require_str(f"property '{self.name}' value", self.value)


@dataclass(frozen=True, slots=True)
class CallSite:
    """A declared message-producing entry point of a repository.

    Call sites are the cache keys of the Resolver: one blueprint is built
    per call site and reused for every invocation.

    Attributes:
        declaring_type: Fully qualified name of the repository
        member: Name of the entry point
        message: Message specification, or None if the declaration is missing
        return_type: Declared return type (None when undeclared)
        argument_types: Declared parameter types, used for validation only
    """

    declaring_type: str
    member: str
    message: MessageSpec | None = None
    return_type: object = None
    argument_types: tuple[object, ...] = ()

    @property
    def identity(self) -> str:
        """Human-readable ``type#member`` identity."""
        return f"{self.declaring_type}#{self.member}"


@dataclass(frozen=True, slots=True)
class RepositorySpec:
    """Everything the runtime needs to know about one message repository.

    Attributes:
        type_name: Fully qualified repository name; the repository's identity
        formatter: Custom formatter name or constructor (None for the default)
        code: Code format (None for bare ids)
        properties: Property declarations in declaration order
        call_sites: Call sites by member name
    """

    type_name: str
    formatter: FormatterSpec | None = None
    code: CodeSpec | None = None
    properties: tuple[PropertySpec, ...] = ()
    call_sites: Mapping[str, CallSite] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    def __post_init__(self) -> None:
        """Validate the repository name and freeze the call site mapping.

        Raises:
            ConfigurationError: If type_name is empty or not a str
        """
        _require_str("repository type name", self.type_name)
        if not self.type_name:
            raise ConfigurationError(
                ErrorTemplate.invalid_declaration("repository type name", "must not be empty")
            )
        if not isinstance(self.call_sites, MappingProxyType):
            # Frozen dataclass: bypass __setattr__ to store the read-only view
            object.__setattr__(self, "call_sites", MappingProxyType(dict(self.call_sites)))

    def call_site(self, member: str) -> CallSite:
        """Look up a call site by member name.

        Raises:
            ConfigurationError: If the repository has no such call site
        """
        site = self.call_sites.get(member)
        if site is None:
            raise ConfigurationError(ErrorTemplate.call_site_not_found(self.type_name, member))
        return site

    def property_map(self) -> Mapping[str, str]:
        """Collapse property declarations into a read-only mapping (last wins)."""
        return MappingProxyType({prop.name: prop.value for prop in self.properties})
