"""Repository dispatch: from a declared class to a callable repository.

Messages.from_type(cls) asks each MessagesProvider in turn for an
implementation of the repository. The first non-None answer is used as
is; when no provider answers, a RepositoryProxy backed by a Resolver is
built from the class declarations.

Providers are either passed explicitly or discovered through the
``textcrate.providers`` entry point group.

Python 3.13+.
"""

import logging
from collections.abc import Callable, Iterable
from importlib.metadata import entry_points
from typing import Protocol, runtime_checkable

from textcrate.constants import PROVIDER_ENTRY_POINT_GROUP
from textcrate.declaration import discover
from textcrate.diagnostics import ConfigurationError, ErrorTemplate
from textcrate.formatters import Formatter, FormatterRegistry
from textcrate.runtime import Message, Resolver

__all__ = [
    "Messages",
    "MessagesProvider",
    "ProxyMessagesProvider",
    "RepositoryProxy",
]

logger = logging.getLogger(__name__)


@runtime_checkable
class MessagesProvider(Protocol):
    """Source of repository implementations."""

    def get_messages(self, cls: type) -> object | None:
        """Return an implementation of the repository cls, or None to pass.

        Args:
            cls: The repository class

        Returns:
            Repository implementation, or None if this provider does not
            handle cls
        """
        ...  # pragma: no cover  # Protocol stub - not executable


class RepositoryProxy:
    """Callable stand-in for a repository class.

    Attribute access for a declared call site returns a function that
    routes its arguments through the Resolver. Any other attribute raises
    AttributeError.

    Equality and hashing delegate to the Resolver, so two proxies of the
    same repository are equal.
    """

    __slots__ = ("_resolver",)

    def __init__(self, resolver: Resolver) -> None:
        if resolver is None:
            raise ConfigurationError(ErrorTemplate.required_input_missing("Resolver"))
        self._resolver = resolver

    def __getattr__(self, name: str) -> Callable[..., Message | str]:
        # Only reached when normal lookup fails; private names are never call sites
        if name.startswith("_"):
            raise AttributeError(name)
        call_site = self._resolver.repository.call_sites.get(name)
        if call_site is None:
            msg = f"{self._resolver.repository.type_name} has no call site '{name}'"
            raise AttributeError(msg)

        resolver = self._resolver

        def invoke(*arguments: object) -> Message | str:
            return resolver.resolve(call_site, arguments)

        invoke.__name__ = name
        invoke.__qualname__ = f"{call_site.declaring_type}.{name}"
        return invoke

    def __dir__(self) -> list[str]:
        return sorted(self._resolver.repository.call_sites)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, RepositoryProxy):
            return NotImplemented
        return self._resolver == other._resolver

    def __hash__(self) -> int:
        return hash(self._resolver)

    def __repr__(self) -> str:
        factory = self._resolver.factory
        return (
            f"RepositoryProxy(repository={self._resolver.repository.type_name!r}, "
            f"formatter={factory.message_formatter!r}, "
            f"code_formatting={factory.code_formatting!r}, "
            f"properties={dict(factory.properties)!r})"
        )


class ProxyMessagesProvider:
    """Provider building a Resolver-backed proxy for any declared class.

    Never passes: it is the provider of last resort.
    """

    __slots__ = ("_default_formatter", "_registry")

    def __init__(
        self,
        *,
        registry: FormatterRegistry | None = None,
        default_formatter: Formatter | None = None,
    ) -> None:
        self._registry = registry
        self._default_formatter = default_formatter

    def get_messages(self, cls: type) -> RepositoryProxy:
        """Build a RepositoryProxy over the declarations of cls.

        Raises:
            ConfigurationError: If cls is not a valid repository declaration
        """
        resolver = Resolver(
            discover(cls), registry=self._registry, default_formatter=self._default_formatter
        )
        return RepositoryProxy(resolver)


def _installed_providers() -> list[MessagesProvider]:
    providers: list[MessagesProvider] = []
    for entry_point in entry_points(group=PROVIDER_ENTRY_POINT_GROUP):
        provider = entry_point.load()
        # Entry points may name a provider class or a ready instance
        if isinstance(provider, type):
            provider = provider()
        logger.debug("Loaded messages provider %r from %s", provider, entry_point.value)
        providers.append(provider)
    return providers


class Messages:
    """Entry point for obtaining repository implementations.

    Example:
        >>> class Greetings:
        ...     @message_spec(1, "Hello, {}!")
        ...     def hello(self, name: str) -> Message: ...
        >>> greetings = Messages.from_type(Greetings)
        >>> greetings.hello("world").message()
        'Hello, world!'
    """

    @staticmethod
    def from_type(
        cls: type,
        *,
        providers: Iterable[MessagesProvider] | None = None,
    ) -> object:
        """Obtain an implementation of the repository cls.

        Args:
            cls: Repository class
            providers: Providers to ask in order (installed entry points if None)

        Returns:
            The first non-None provider answer, else a RepositoryProxy

        Raises:
            ConfigurationError: If cls is None or not a valid declaration
        """
        if cls is None:
            raise ConfigurationError(ErrorTemplate.required_input_missing("Class"))

        candidates = list(providers) if providers is not None else _installed_providers()
        for provider in candidates:
            messages = provider.get_messages(cls)
            if messages is not None:
                logger.debug("Using %r from provider %r", cls, provider)
                return messages

        return ProxyMessagesProvider().get_messages(cls)
