"""Inline scanning subsystem for Rivit.

Provides mixins for tokenizing a single line into styled runs:
- Italic and bold (``*``, ``**``)
- Mono (`````)
- Internal and external links (``{}``, ``[]``)
- Plain text with backslash escapes

"""

from __future__ import annotations

from rivit.parsing.inline.core import InlineParsingCoreMixin
from rivit.parsing.inline.emphasis import EmphasisMixin
from rivit.parsing.inline.links import LinkParsingMixin
from rivit.parsing.inline.text import PlainTextMixin


class InlineParsingMixin(
    InlineParsingCoreMixin,
    EmphasisMixin,
    LinkParsingMixin,
    PlainTextMixin,
):
    """Combined inline scanning mixin.

    InlineParsingCoreMixin comes first so its ``_scan_delimited`` wins over
    the declaration stubs in the construct mixins.

    """

    pass


__all__ = [
    "InlineParsingMixin",
    "InlineParsingCoreMixin",
    "EmphasisMixin",
    "LinkParsingMixin",
    "PlainTextMixin",
]
