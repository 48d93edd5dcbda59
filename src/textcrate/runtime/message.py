"""Message: a blueprint applied to the arguments of one call.

Python 3.13+.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from textcrate.diagnostics import ConfigurationError, ErrorTemplate

if TYPE_CHECKING:
    from .blueprint import Blueprint

__all__ = ["Message"]


class Message:
    """A message produced by a repository call site.

    Text and code are computed on every access from the shared blueprint;
    only the arguments belong to the message itself. Arguments are copied
    into a tuple on construction, so later changes to the caller's sequence
    do not affect the message.

    Locale arguments are accepted for API stability and ignored: patterns
    and messages are locale-invariant.

    Equality: same blueprint and equal arguments. The hash covers only the
    blueprint, so messages with unhashable arguments are still hashable.

    Example:
        >>> message = messages.hello("world")
        >>> message.message()
        'Hello, world!'
        >>> message.code()
        '[APP]:2112-code'
        >>> str(message)
        '[APP]:2112-code Hello, world!'
    """

    __slots__ = ("_arguments", "_blueprint")

    def __init__(self, blueprint: "Blueprint", arguments: Iterable[object] | None = None) -> None:
        """Initialize Message.

        Args:
            blueprint: Blueprint of the call site
            arguments: Call arguments (None means no arguments)

        Raises:
            ConfigurationError: If blueprint is None
        """
        if blueprint is None:
            raise ConfigurationError(ErrorTemplate.required_input_missing("Blueprint"))
        self._blueprint = blueprint
        self._arguments: tuple[object, ...] = tuple(arguments) if arguments is not None else ()

    @property
    def blueprint(self) -> "Blueprint":
        """Blueprint shared by all messages of the call site."""
        return self._blueprint

    def pattern(self, locale: object = None) -> str:  # noqa: ARG002 - locale-invariant
        """Formatting pattern the message is built from."""
        return self._blueprint.pattern

    def message(self, locale: object = None) -> str:  # noqa: ARG002 - locale-invariant
        """Full text: the pattern applied to the arguments."""
        return self._blueprint.format(self._arguments)

    def arguments(self) -> tuple[object, ...]:
        """Arguments of the call that produced this message."""
        return self._arguments

    def code(self) -> str:
        """Code identifying the message within its repository."""
        return self._blueprint.code

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Message) or type(other) is not type(self):
            return NotImplemented
        return self._blueprint == other._blueprint and self._arguments == other._arguments

    def __hash__(self) -> int:
        return hash(self._blueprint)

    def __str__(self) -> str:
        return f"{self.code()} {self.message()}"

    def __repr__(self) -> str:
        return f"Message(blueprint={self._blueprint!r}, arguments={self._arguments!r})"

    # Defined last: the name shadows the property builtin inside the class body
    def property(self, name: str) -> str | None:
        """Custom property of the message, or None if undefined."""
        return self._blueprint.get_property(name)
