"""Registry mapping formatter names to zero-argument constructors.

Repositories may name their formatter ("pattern", "to-string", or any
custom registration) instead of referencing a class. The registry turns
that name into a fresh Formatter instance; a lookup or construction
failure is reported as ConfigurationError so the caller can degrade.

Architecture:
    - FormatterRegistry: Manages registration and instantiation
    - create_default_registry(): Registry with the built-in formatters
    - get_shared_registry(): Lazily created, process-wide default registry

Python 3.13+. Zero external dependencies.
"""

import threading
from collections.abc import Callable, Iterator

from textcrate.diagnostics import ConfigurationError, ErrorTemplate

from .base import Formatter
from .pattern import PatternFormatter
from .single_argument import SingleArgumentFormatter
from .to_string import ToStringFormatter

__all__ = [
    "FormatterFactory",
    "FormatterRegistry",
    "FormatterSpec",
    "create_default_registry",
    "get_shared_registry",
]

# Zero-argument constructor of a Formatter (usually the formatter class itself).
type FormatterFactory = Callable[[], Formatter]

# What a repository may declare as its formatter: a registered name or a constructor.
type FormatterSpec = str | FormatterFactory


class FormatterRegistry:
    """Manages formatter registration and instantiation.

    Supports dict-like introspection:
        - list_formatters(): List all registered names
        - __iter__: Iterate over names
        - __len__: Count registered formatters
        - __contains__: Check if a name exists (supports 'in' operator)

    Example:
        >>> registry = FormatterRegistry()
        >>> registry.register("shout", ShoutFormatter)
        >>> "shout" in registry
        True
        >>> registry.create("shout")
        ShoutFormatter()
    """

    __slots__ = ("_factories", "_frozen")

    def __init__(self) -> None:
        """Initialize empty formatter registry."""
        self._factories: dict[str, FormatterFactory] = {}
        self._frozen = False

    def register(self, name: str, factory: FormatterFactory) -> None:
        """Register a formatter constructor under a name.

        Registering an existing name replaces the previous constructor.

        Args:
            name: Name repositories use to refer to the formatter
            factory: Zero-argument callable returning a Formatter

        Raises:
            ConfigurationError: If name is empty or factory is not callable
            TypeError: If the registry is frozen
        """
        if self._frozen:
            msg = "Cannot register on a frozen FormatterRegistry; use copy() first"
            raise TypeError(msg)
        if not name:
            raise ConfigurationError(
                ErrorTemplate.invalid_declaration("formatter name", "must not be empty")
            )
        if not callable(factory):
            raise ConfigurationError(
                ErrorTemplate.invalid_declaration(f"formatter '{name}'", "factory is not callable")
            )
        self._factories[name] = factory

    def create(self, spec: FormatterSpec) -> Formatter:
        """Instantiate a formatter from a registered name or a constructor.

        Args:
            spec: Registered name, or a zero-argument constructor

        Returns:
            New Formatter instance

        Raises:
            ConfigurationError: If the name is unknown, the constructor fails,
                or it returns something that is not a Formatter
        """
        if isinstance(spec, str):
            factory = self._factories.get(spec)
            if factory is None:
                raise ConfigurationError(ErrorTemplate.formatter_not_found(spec, list(self)))
        else:
            factory = spec

        try:
            formatter = factory()
        except Exception as e:  # pylint: disable=broad-exception-caught
            raise ConfigurationError(
                ErrorTemplate.formatter_not_instantiable(spec, f"{type(e).__name__}: {e}")
            ) from e

        if not isinstance(formatter, Formatter):
            raise ConfigurationError(
                ErrorTemplate.formatter_not_instantiable(
                    spec, f"{type(formatter).__name__} has no format() method"
                )
            )
        return formatter

    def freeze(self) -> None:
        """Prevent further registrations."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        """True when register() is no longer allowed."""
        return self._frozen

    def copy(self) -> "FormatterRegistry":
        """Create an independent, unfrozen copy of this registry.

        Returns:
            New FormatterRegistry with the same registrations
        """
        clone = FormatterRegistry()
        clone._factories = dict(self._factories)  # noqa: SLF001 - same class
        return clone

    def list_formatters(self) -> list[str]:
        """List all registered formatter names."""
        return list(self._factories.keys())

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __repr__(self) -> str:
        return f"FormatterRegistry(formatters={len(self)})"


def create_default_registry() -> FormatterRegistry:
    """Create a registry with the built-in formatters.

    Registered names:
        - "pattern": PatternFormatter
        - "single-argument": SingleArgumentFormatter
        - "to-string": ToStringFormatter

    Returns:
        New FormatterRegistry
    """
    registry = FormatterRegistry()
    registry.register("pattern", PatternFormatter)
    registry.register("single-argument", SingleArgumentFormatter)
    registry.register("to-string", ToStringFormatter)
    return registry


_shared_registry: FormatterRegistry | None = None
_shared_registry_lock = threading.Lock()


def get_shared_registry() -> FormatterRegistry:
    """Get the process-wide default registry, creating it on first use.

    The returned registry is frozen. Callers that register custom formatters
    should do so on a copy (``get_shared_registry().copy()``) or on their own
    registry, and pass it to the Resolver explicitly.

    Returns:
        The shared, frozen FormatterRegistry
    """
    # pylint: disable=global-statement
    global _shared_registry  # noqa: PLW0603
    if _shared_registry is None:
        with _shared_registry_lock:
            if _shared_registry is None:
                registry = create_default_registry()
                registry.freeze()
                _shared_registry = registry
    return _shared_registry
