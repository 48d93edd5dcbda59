"""textcrate - typed message repositories with SLF4J-style patterns.

Declare messages once on a class (or with a builder), get back objects
that produce formatted text, a stable message code and custom properties.
Formatting never fails the caller: broken formatters degrade to a
diagnostic rendering of the pattern and arguments.

Public API:
    Messages - Obtain a repository implementation for a declared class
    Message - A formatted message (text, code, arguments, properties)
    Resolver - Resolves call sites of one repository into messages
    message_spec, code_spec, message_formatter, message_property - Declarations
    repository - Fluent builder for repository declarations
    validate_repository - Check declared patterns against their parameters

Exceptions:
    TextCrateError - Base exception class
    InvalidPatternError - Pattern rejected by a validator
    ConfigurationError - Repository or formatter set up incorrectly

Submodules:
    textcrate.formatters - Formatter contracts, built-ins and registry
    textcrate.runtime - Blueprints, blueprint factory and cache
    textcrate.declaration - Repository specifications and discovery
    textcrate.diagnostics - Error types, codes and validation results
"""

from .declaration import (
    code_spec,
    discover,
    message_formatter,
    message_property,
    message_spec,
    repository,
)
from .diagnostics import ConfigurationError, InvalidPatternError, TextCrateError
from .repository import Messages, MessagesProvider
from .runtime import Message, Resolver
from .validation import validate_repository

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("textcrate")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigurationError",
    "InvalidPatternError",
    "Message",
    "Messages",
    "MessagesProvider",
    "Resolver",
    "TextCrateError",
    "__version__",
    "code_spec",
    "discover",
    "message_formatter",
    "message_property",
    "message_spec",
    "repository",
    "validate_repository",
]
