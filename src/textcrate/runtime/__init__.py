"""Runtime: blueprints, messages and call-site resolution.

Python 3.13+.
"""

from .blueprint import (
    Blueprint,
    CodeBlueprint,
    CodeFormatting,
    MessageBlueprint,
    MessageFormatting,
    UnannotatedBlueprint,
)
from .cache import BlueprintCache
from .factory import BlueprintFactory, find_duplicate_ids
from .message import Message
from .resolver import Resolver

__all__ = [
    "Blueprint",
    "BlueprintCache",
    "BlueprintFactory",
    "CodeBlueprint",
    "CodeFormatting",
    "Message",
    "MessageBlueprint",
    "MessageFormatting",
    "Resolver",
    "UnannotatedBlueprint",
    "find_duplicate_ids",
]
