"""Declaration layer: how message repositories are described.

Two equivalent ways to declare a repository:
    - repository(name)...build(): fluent builder
    - @message_spec / @code_spec / @message_formatter / @message_property
      on a class, read by discover(cls)

Both produce an immutable RepositorySpec consumed by the runtime.

Python 3.13+.
"""

from .builder import RepositoryBuilder, repository
from .decorators import code_spec, discover, message_formatter, message_property, message_spec
from .specs import CallSite, CodeSpec, MessageSpec, PropertySpec, RepositorySpec

__all__ = [
    "CallSite",
    "CodeSpec",
    "MessageSpec",
    "PropertySpec",
    "RepositoryBuilder",
    "RepositorySpec",
    "code_spec",
    "discover",
    "message_formatter",
    "message_property",
    "message_spec",
    "repository",
]
