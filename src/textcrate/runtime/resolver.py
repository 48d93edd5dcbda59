"""Resolver: turns call-site invocations into messages.

One Resolver serves one repository. For every invocation it looks up (or
builds, once) the blueprint of the call site and shapes the result by the
declared return type: a Message, or the formatted text.

Thread Safety:
    Resolvers are safe to share across threads. Blueprints are cached per
    call site with at most one observable instance each (see BlueprintCache).

Python 3.13+.
"""

import logging
from collections.abc import Sequence

from textcrate.declaration import CallSite, RepositorySpec
from textcrate.diagnostics import ConfigurationError, ErrorTemplate
from textcrate.enums import ReturnKind
from textcrate.formatters import Formatter, FormatterRegistry

from .blueprint import Blueprint
from .cache import BlueprintCache
from .factory import BlueprintFactory
from .message import Message

__all__ = ["Resolver"]

logger = logging.getLogger(__name__)


class Resolver:
    """Resolves call sites of one repository into messages.

    Equality and hashing use the repository type name only: two resolvers
    over the same repository are interchangeable.

    Example:
        >>> spec = (
        ...     repository("app.Messages")
        ...     .code_format("[APP]:{}-code", offset=2000)
        ...     .message("hello", 112, "Hello, {}!")
        ...     .build()
        ... )
        >>> resolver = Resolver(spec)
        >>> str(resolver.invoke("hello", "world"))
        '[APP]:2112-code Hello, world!'
    """

    __slots__ = ("_cache", "_factory", "_repository")

    def __init__(
        self,
        repository: RepositorySpec,
        *,
        registry: FormatterRegistry | None = None,
        default_formatter: Formatter | None = None,
    ) -> None:
        """Initialize Resolver.

        Args:
            repository: Repository declaration
            registry: Registry resolving formatter names (shared registry if None)
            default_formatter: Formatter used when the repository declares none

        Raises:
            ConfigurationError: If repository is None or invalid
        """
        self._factory = BlueprintFactory(
            repository, registry=registry, default_formatter=default_formatter
        )
        self._repository = repository
        self._cache: BlueprintCache[CallSite, Blueprint] = BlueprintCache()

    @property
    def repository(self) -> RepositorySpec:
        return self._repository

    @property
    def factory(self) -> BlueprintFactory:
        return self._factory

    def resolve(
        self, call_site: CallSite, arguments: Sequence[object] | None = None
    ) -> Message | str:
        """Produce the value of one call-site invocation.

        Args:
            call_site: The invoked call site
            arguments: Call arguments (None means no arguments)

        Returns:
            Message, or the formatted text when the call site returns str

        Raises:
            ConfigurationError: If the call site declares an unsupported
                return type
        """
        args = tuple(arguments) if arguments is not None else ()
        blueprint = self.blueprint_for(call_site)

        match ReturnKind.of(call_site.return_type):
            case ReturnKind.MESSAGE:
                return Message(blueprint, args)
            case ReturnKind.TEXT:
                return blueprint.format(args)
            case _:
                raise ConfigurationError(
                    ErrorTemplate.unsupported_return_type(
                        call_site.identity, call_site.return_type
                    )
                )

    def invoke(self, member: str, *arguments: object) -> Message | str:
        """Resolve the repository call site named member.

        Raises:
            ConfigurationError: If the repository has no such call site
        """
        return self.resolve(self._repository.call_site(member), arguments)

    def blueprint_for(self, call_site: CallSite) -> Blueprint:
        """Cached blueprint of a call site, built on first use."""
        if call_site is None:
            raise ConfigurationError(ErrorTemplate.required_input_missing("Call site"))
        return self._cache.get_or_create(call_site, lambda: self._build(call_site))

    def _build(self, call_site: CallSite) -> Blueprint:
        if call_site.message is not None:
            return self._factory.create_blueprint(call_site.message)
        logger.debug("No message declared for %s; using unannotated blueprint", call_site.identity)
        return self._factory.create_unannotated_blueprint(call_site)

    def cache_stats(self) -> dict[str, int]:
        """Get blueprint cache statistics.

        Returns:
            Dict with keys: size, hits, misses
        """
        return self._cache.get_stats()

    def clear_cache(self) -> None:
        self._cache.clear()

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Resolver):
            return NotImplemented
        return self._repository.type_name == other._repository.type_name

    def __hash__(self) -> int:
        return hash(self._repository.type_name)

    def __repr__(self) -> str:
        return f"Resolver(repository={self._repository.type_name!r})"
