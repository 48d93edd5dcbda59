"""BlueprintFactory: turns a repository declaration into blueprints.

The factory resolves everything that is shared by all messages of one
repository exactly once: the message formatter, the code formatting and
the property mapping. Individual blueprints are then cheap to create.

Formatter resolution:
    - Declared formatter constructed successfully: ResilientFormatter
      wrapping it with a ToStringFormatter fallback
    - Declared formatter cannot be constructed: bare ToStringFormatter
      (error logged)
    - No declaration: ResilientFormatter over the default formatter
      (PatternFormatter unless overridden)

Python 3.13+.
"""

import logging
from collections.abc import Mapping

from textcrate.declaration import CallSite, MessageSpec, RepositorySpec
from textcrate.diagnostics import ConfigurationError, ErrorTemplate
from textcrate.formatters import (
    Formatter,
    FormatterRegistry,
    PatternFormatter,
    ResilientFormatter,
    SingleArgumentFormatter,
    ToStringFormatter,
    get_shared_registry,
)

from .blueprint import (
    CodeBlueprint,
    CodeFormatting,
    MessageBlueprint,
    MessageFormatting,
    UnannotatedBlueprint,
)

__all__ = ["BlueprintFactory", "find_duplicate_ids"]

logger = logging.getLogger(__name__)


class BlueprintFactory:
    """Creates message blueprints for the call sites of one repository.

    Attributes:
        repository: The repository declaration
        message_formatter: Formatter applied to message patterns
        code_formatting: Formatting shared by all message codes
        properties: Read-only repository properties (last declaration wins)
    """

    __slots__ = ("code_formatting", "message_formatter", "properties", "repository")

    def __init__(
        self,
        repository: RepositorySpec,
        *,
        registry: FormatterRegistry | None = None,
        default_formatter: Formatter | None = None,
    ) -> None:
        """Initialize BlueprintFactory.

        Args:
            repository: Repository declaration
            registry: Registry resolving formatter names (shared registry if None)
            default_formatter: Formatter used when the repository declares none

        Raises:
            ConfigurationError: If repository is None or declares the same
                message id on two call sites
        """
        if repository is None:
            raise ConfigurationError(ErrorTemplate.required_input_missing("Repository"))
        _check_unique_ids(repository)

        self.repository = repository
        self.message_formatter = _message_formatter(
            repository, registry if registry is not None else get_shared_registry(), default_formatter
        )
        self.code_formatting = self._code_formatting()
        self.properties: Mapping[str, str] = repository.property_map()

    def _code_formatting(self) -> CodeFormatting:
        code = self.repository.code
        if code is None:
            return CodeFormatting(0, "", SingleArgumentFormatter())
        return CodeFormatting(code.offset, code.pattern, self.message_formatter)

    def create_blueprint(self, spec: MessageSpec) -> MessageBlueprint:
        """Create the blueprint of a declared message.

        Args:
            spec: Message specification

        Returns:
            MessageBlueprint sharing this factory's formatters and properties

        Raises:
            ConfigurationError: If spec is None
        """
        if spec is None:
            raise ConfigurationError(ErrorTemplate.required_input_missing("Message specification"))
        return MessageBlueprint(
            CodeBlueprint(spec.id, self.code_formatting),
            MessageFormatting(spec.pattern, self.message_formatter),
            self.properties,
        )

    def create_unannotated_blueprint(self, call_site: CallSite) -> UnannotatedBlueprint:
        """Create the fallback blueprint of a call site without a message."""
        return UnannotatedBlueprint(call_site, self.properties)

    def __repr__(self) -> str:
        return (
            f"BlueprintFactory(repository={self.repository.type_name!r}, "
            f"message_formatter={self.message_formatter!r}, "
            f"code_formatting={self.code_formatting!r}, "
            f"properties={dict(self.properties)!r})"
        )


def find_duplicate_ids(repository: RepositorySpec) -> dict[int, list[str]]:
    """Message ids declared by more than one call site, with those members."""
    seen: dict[int, list[str]] = {}
    for member, call_site in repository.call_sites.items():
        if call_site.message is not None:
            seen.setdefault(call_site.message.id, []).append(member)
    return {message_id: members for message_id, members in seen.items() if len(members) > 1}


def _check_unique_ids(repository: RepositorySpec) -> None:
    duplicates = find_duplicate_ids(repository)
    if duplicates:
        message_id, members = next(iter(duplicates.items()))
        raise ConfigurationError(
            ErrorTemplate.duplicate_message_id(repository.type_name, message_id, members)
        )


def _message_formatter(
    repository: RepositorySpec,
    registry: FormatterRegistry,
    default_formatter: Formatter | None,
) -> Formatter:
    if repository.formatter is None:
        delegate = default_formatter if default_formatter is not None else PatternFormatter()
        return ResilientFormatter(delegate, ToStringFormatter())

    try:
        custom = registry.create(repository.formatter)
    except ConfigurationError:
        logger.error(
            "Cannot create formatter %r for %s; using ToStringFormatter",
            repository.formatter,
            repository.type_name,
            exc_info=True,
        )
        return ToStringFormatter()
    return ResilientFormatter(custom, ToStringFormatter())
