"""Fluent builder for message repository specifications.

Example:
    >>> spec = (
    ...     repository("app.Messages")
    ...     .code_format("[APP]:{}-code", offset=2000)
    ...     .property("severity", "info")
    ...     .message("hello", 112, "Hello, {}!", arguments=(str,))
    ...     .build()
    ... )
    >>> spec.call_site("hello").message.id
    112

Python 3.13+.
"""

from textcrate.diagnostics import ConfigurationError, ErrorTemplate
from textcrate.formatters import FormatterSpec

from .specs import CallSite, CodeSpec, MessageSpec, PropertySpec, RepositorySpec

__all__ = ["RepositoryBuilder", "repository"]


class RepositoryBuilder:
    """Accumulates declarations and produces an immutable RepositorySpec.

    Every declaring method returns the builder itself so calls can be
    chained. build() may be called more than once; each call returns a new
    RepositorySpec reflecting the declarations made so far.
    """

    __slots__ = ("_call_sites", "_code", "_formatter", "_properties", "_type_name")

    def __init__(self, type_name: str) -> None:
        if not isinstance(type_name, str) or not type_name:
            raise ConfigurationError(
                ErrorTemplate.invalid_declaration(
                    "repository type name", "must be a non-empty str"
                )
            )
        self._type_name = type_name
        self._formatter: FormatterSpec | None = None
        self._code: CodeSpec | None = None
        self._properties: list[PropertySpec] = []
        self._call_sites: dict[str, CallSite] = {}

    def formatter(self, spec: FormatterSpec) -> "RepositoryBuilder":
        """Use a custom formatter (registered name or zero-argument constructor)."""
        self._formatter = spec
        return self

    def code_format(self, pattern: str, offset: int = 0) -> "RepositoryBuilder":
        """Format message codes with a pattern after adding an offset to the id."""
        self._code = CodeSpec(pattern=pattern, offset=offset)
        return self

    def property(self, name: str, value: str) -> "RepositoryBuilder":
        """Attach a property to every message. A repeated name overrides earlier values."""
        self._properties.append(PropertySpec(name=name, value=value))
        return self

    def message(
        self,
        member: str,
        id: int,  # noqa: A002 - mirrors MessageSpec.id
        pattern: str,
        *,
        returns: object = None,
        arguments: tuple[object, ...] = (),
    ) -> "RepositoryBuilder":
        """Declare a call site producing a message.

        Args:
            member: Call site name
            id: Message id
            pattern: Message pattern
            returns: Declared return type (Message or str; None means Message)
            arguments: Parameter types, used by validate_repository()

        Raises:
            ConfigurationError: If the member is already declared
        """
        return self._add(member, MessageSpec(id=id, pattern=pattern), returns, arguments)

    def unannotated(
        self,
        member: str,
        *,
        returns: object = None,
        arguments: tuple[object, ...] = (),
    ) -> "RepositoryBuilder":
        """Declare a call site without a message specification.

        Invoking it produces a diagnostic "Unannotated message" instead of failing.
        """
        return self._add(member, None, returns, arguments)

    def build(self) -> RepositorySpec:
        """Create the RepositorySpec."""
        return RepositorySpec(
            type_name=self._type_name,
            formatter=self._formatter,
            code=self._code,
            properties=tuple(self._properties),
            call_sites=dict(self._call_sites),
        )

    def _add(
        self,
        member: str,
        message: MessageSpec | None,
        returns: object,
        arguments: tuple[object, ...],
    ) -> "RepositoryBuilder":
        if not isinstance(member, str) or not member:
            raise ConfigurationError(
                ErrorTemplate.invalid_declaration("call site name", "must be a non-empty str")
            )
        if member in self._call_sites:
            raise ConfigurationError(ErrorTemplate.duplicate_call_site(self._type_name, member))
        self._call_sites[member] = CallSite(
            declaring_type=self._type_name,
            member=member,
            message=message,
            return_type=returns,
            argument_types=tuple(arguments),
        )
        return self


def repository(type_name: str) -> RepositoryBuilder:
    """Start declaring a message repository.

    Args:
        type_name: Fully qualified repository name

    Returns:
        New RepositoryBuilder
    """
    return RepositoryBuilder(type_name)
