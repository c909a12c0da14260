"""Parsing subsystem for Rivit.

Provides mixin classes for the two scanning layers:
- `BlockParsingMixin`: line classification and multi-line grouping
- `InlineParsingMixin`: styled runs within a single line

Example:
    >>> from rivit.parsing import BlockParsingMixin, InlineParsingMixin
    >>> class Parser(InlineParsingMixin, BlockParsingMixin):
    ...     pass

"""

from rivit.parsing.blocks import BlockParsingMixin
from rivit.parsing.inline import InlineParsingMixin

__all__ = [
    "BlockParsingMixin",
    "InlineParsingMixin",
]
