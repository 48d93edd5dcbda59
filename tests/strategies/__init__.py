"""Hypothesis strategies for textcrate property-based testing.

Usage:
    from tests.strategies import placeholder_patterns, format_arguments

Event-Emitting Strategies (HypoFuzz-Optimized):
    - placeholder_patterns: emits pattern_escapes={kind}
    - message_ids: emits message_id={boundary}
"""

from .patterns import (
    PatternPart,
    format_arguments,
    message_ids,
    placeholder_patterns,
    plain_text,
    render_expected,
)

__all__ = [
    "PatternPart",
    "format_arguments",
    "message_ids",
    "placeholder_patterns",
    "plain_text",
    "render_expected",
]
