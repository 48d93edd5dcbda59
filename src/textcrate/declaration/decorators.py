"""Decorator-based repository declarations and class discovery.

A repository is declared as a class whose public methods are call sites:

    @code_spec("[APP]:{}-code", offset=2000)
    @message_property("severity", "info")
    class AppMessages:
        @message_spec(112, "Hello, {}!")
        def hello(self, name: str) -> Message: ...

        @message_spec(113, "Bye, {}!")
        def bye(self, name: str) -> str: ...

discover(AppMessages) reads these declarations into a RepositorySpec.
Method bodies are never executed.

Python 3.13+.
"""

import builtins
import inspect
import logging
import typing
from collections.abc import Callable

from textcrate.diagnostics import ConfigurationError, ErrorTemplate
from textcrate.formatters import FormatterSpec

from .specs import CallSite, CodeSpec, MessageSpec, PropertySpec, RepositorySpec

__all__ = [
    "code_spec",
    "discover",
    "message_formatter",
    "message_property",
    "message_spec",
]

logger = logging.getLogger(__name__)

_MESSAGE_ATTR = "__textcrate_message__"
_CODE_ATTR = "__textcrate_code__"
_FORMATTER_ATTR = "__textcrate_formatter__"
_PROPERTIES_ATTR = "__textcrate_properties__"

_UNRESOLVED = object()


def message_spec[F: Callable[..., object]](
    id: int,  # noqa: A002 - mirrors MessageSpec.id
    pattern: str,
) -> Callable[[F], F]:
    """Declare the message produced by a repository method.

    Args:
        id: Message id, unique within the repository
        pattern: Message pattern with ``{}`` placeholders
    """
    spec = MessageSpec(id=id, pattern=pattern)

    def decorate(func: F) -> F:
        setattr(func, _MESSAGE_ATTR, spec)
        return func

    return decorate


def code_spec[T: type](pattern: str, offset: int = 0) -> Callable[[T], T]:
    """Declare the code format of a repository class."""
    spec = CodeSpec(pattern=pattern, offset=offset)

    def decorate(cls: T) -> T:
        setattr(cls, _CODE_ATTR, spec)
        return cls

    return decorate


def message_formatter[T: type](spec: FormatterSpec) -> Callable[[T], T]:
    """Declare the formatter of a repository class (registered name or constructor)."""

    def decorate(cls: T) -> T:
        setattr(cls, _FORMATTER_ATTR, spec)
        return cls

    return decorate


def message_property[T: type](name: str, value: str) -> Callable[[T], T]:
    """Attach a property to every message of a repository class.

    Repeatable. Properties keep source order (top to bottom); when a name
    is repeated, the lowest declaration wins.
    """
    prop = PropertySpec(name=name, value=value)

    def decorate(cls: T) -> T:
        # Decorators apply bottom-up, so prepend to keep source order
        existing: tuple[PropertySpec, ...] = vars(cls).get(_PROPERTIES_ATTR, ())
        setattr(cls, _PROPERTIES_ATTR, (prop, *existing))
        return cls

    return decorate


def discover(cls: type) -> RepositorySpec:
    """Read the declarations of a repository class.

    Every public function defined on the class or its bases (except
    ``object``) becomes a call site. Class-level declarations are not
    inherited.

    Args:
        cls: Repository class

    Returns:
        RepositorySpec describing the class

    Raises:
        ConfigurationError: If cls is None or not a class
    """
    if cls is None:
        raise ConfigurationError(ErrorTemplate.required_input_missing("Class"))
    if not isinstance(cls, type):
        raise ConfigurationError(
            ErrorTemplate.invalid_declaration(
                "repository", f"{cls!r} is not a class"
            )
        )

    type_name = f"{cls.__module__}.{cls.__qualname__}"
    attributes = vars(cls)

    functions: dict[str, Callable[..., object]] = {}
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        for name, value in vars(klass).items():
            if not name.startswith("_") and inspect.isfunction(value):
                functions[name] = value

    call_sites = {
        name: _call_site(type_name, name, func) for name, func in functions.items()
    }

    if _FORMATTER_ATTR not in attributes:
        logger.debug("No formatter declared on %s. Default will be used", type_name)
    if _CODE_ATTR not in attributes:
        logger.debug("No code format declared on %s. Default will be used", type_name)

    return RepositorySpec(
        type_name=type_name,
        formatter=attributes.get(_FORMATTER_ATTR),
        code=attributes.get(_CODE_ATTR),
        properties=attributes.get(_PROPERTIES_ATTR, ()),
        call_sites=call_sites,
    )


def _call_site(type_name: str, name: str, func: Callable[..., object]) -> CallSite:
    hints = _type_hints(func)

    # Code object rather than inspect.signature(): annotations may be
    # unresolvable forward references
    code = func.__code__
    parameters = code.co_varnames[: code.co_argcount][1:]  # drop self

    return CallSite(
        declaring_type=type_name,
        member=name,
        message=getattr(func, _MESSAGE_ATTR, None),
        return_type=hints.get("return"),
        argument_types=tuple(hints.get(param, object) for param in parameters),
    )


def _type_hints(func: Callable[..., object]) -> dict[str, object]:
    try:
        return typing.get_type_hints(func)
    except (NameError, TypeError, AttributeError) as e:
        logger.debug("Could not resolve annotations of %s: %s", func.__qualname__, e)

    # Unresolvable forward references: resolve entries one at a time,
    # keeping the raw annotation where a name cannot be found
    try:
        raw = dict(getattr(func, "__annotations__", {}))
    except NameError:
        return {}
    namespace = getattr(func, "__globals__", {})
    hints = {name: _resolve_dotted(value, namespace) for name, value in raw.items()}
    if "return" in hints and hints["return"] is None:
        hints["return"] = type(None)
    return hints


def _resolve_dotted(annotation: object, namespace: dict[str, object]) -> object:
    """Look up a dotted-name string annotation such as ``"textcrate.Message"``.

    Anything else, including subscripted or union strings, is returned unchanged.
    """
    if not isinstance(annotation, str):
        return annotation
    head, *rest = annotation.strip().split(".")
    value = namespace.get(head, getattr(builtins, head, _UNRESOLVED))
    for part in rest:
        if value is _UNRESOLVED:
            break
        value = getattr(value, part, _UNRESOLVED)
    return annotation if value is _UNRESOLVED else value
