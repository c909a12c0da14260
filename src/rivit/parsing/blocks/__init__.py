"""Block scanning subsystem for Rivit.

Provides mixins for line-level constructs:
- Comments, nav links, embeds, indented blocks, headers and paragraphs
- Lists with nested items

"""

from rivit.parsing.blocks.core import BlockParsingCoreMixin
from rivit.parsing.blocks.list import ListParsingMixin


class BlockParsingMixin(
    BlockParsingCoreMixin,
    ListParsingMixin,
):
    """Combined block scanning mixin."""

    pass


__all__ = [
    "BlockParsingMixin",
    "BlockParsingCoreMixin",
    "ListParsingMixin",
]
