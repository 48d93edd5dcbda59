"""Shared constants for textcrate.

Centralized configuration constants used across the formatter, runtime
and declaration packages. Placing constants here avoids circular imports
and provides a single source of truth.

Constants are grouped by domain:
- Message identifiers: Range and sentinel codes
- Placeholders: Pattern syntax
- Fallback strings: Diagnostic output of last-resort formatting
- Discovery: Entry point group for alternate repository providers

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Message identifiers
    "MAX_MESSAGE_ID",
    "UNANNOTATED_CODE",
    # Placeholders
    "PLACEHOLDER",
    "ESCAPE_CHAR",
    # Fallback strings
    "FALLBACK_TO_STRING",
    "FALLBACK_UNANNOTATED",
    # Discovery
    "PROVIDER_ENTRY_POINT_GROUP",
]

# ============================================================================
# MESSAGE IDENTIFIERS
# ============================================================================

# Message ids are 32-bit signed integers. The largest one is reserved as the
# code of messages whose call site carries no message specification.
MAX_MESSAGE_ID: int = 2_147_483_647

# Code reported by unannotated call sites.
UNANNOTATED_CODE: str = str(MAX_MESSAGE_ID)

# ============================================================================
# PLACEHOLDERS
# ============================================================================

PLACEHOLDER: str = "{}"
ESCAPE_CHAR: str = "\\"

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# These are format strings - use .format(...) with the named fields.
FALLBACK_TO_STRING: str = "Pattern: '{pattern}'. Arguments: {arguments}"
FALLBACK_UNANNOTATED: str = "Unannotated message: {type_name}#{member}({arguments})"

# ============================================================================
# DISCOVERY
# ============================================================================

# Entry point group scanned by Messages.from_type() for MessagesProvider
# implementations.
PROVIDER_ENTRY_POINT_GROUP: str = "textcrate.providers"
