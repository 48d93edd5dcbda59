"""Enumerations for textcrate type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum

__all__ = ["ReturnKind"]


class ReturnKind(StrEnum):
    """Shape of the value a call site produces.

    StrEnum provides automatic string conversion: str(ReturnKind.TEXT) == "text"
    """

    MESSAGE = "message"
    """Call site returns a Message (or declares no return type)."""

    TEXT = "text"
    """Call site returns the formatted text as a plain string."""

    UNSUPPORTED = "unsupported"
    """Call site declares a return type the resolver cannot produce."""

    @classmethod
    def of(cls, return_type: object) -> "ReturnKind":
        """Classify a declared return type.

        Args:
            return_type: Declared return type of a call site (None when undeclared)

        Returns:
            MESSAGE for Message subclasses or an undeclared return type,
            TEXT for str subclasses, UNSUPPORTED otherwise
        """
        # Lazy import: runtime.message imports this module
        from textcrate.runtime.message import Message  # noqa: PLC0415

        if return_type is None:
            return cls.MESSAGE
        if isinstance(return_type, type):
            if issubclass(return_type, Message):
                return cls.MESSAGE
            if issubclass(return_type, str):
                return cls.TEXT
        return cls.UNSUPPORTED
