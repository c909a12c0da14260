"""Internal and external links.

Syntax:
    {target}            internal link displaying its target
    {target display}    internal link with display text
    [target display]    external link (same shape)

The first space inside the brackets separates the target from the display
text. A link with an empty target is dropped.

"""

from rivit.nodes import StyledText, TextStyle
from rivit.parsing.charsets import LINK_CLOSERS, lstrip, rstrip, strip

_LINK_STYLES: dict[str, TextStyle] = {
    "{": TextStyle.INTERNAL_LINK,
    "[": TextStyle.EXTERNAL_LINK,
}


class LinkParsingMixin:
    """Mixin for ``{internal}`` and ``[external]`` links."""

    def _scan_delimited(self, line: str, start: int, closer: str) -> tuple[str, int]:
        """Find closer. Implemented by InlineParsingCoreMixin."""
        raise NotImplementedError

    def _parse_link(self, line: str, pos: int) -> tuple[StyledText | None, int]:
        """Parse a link starting at ``{`` or ``[``."""
        opener = line[pos]
        inner, end = self._scan_delimited(line, pos + 1, LINK_CLOSERS[opener])

        link = strip(inner)
        value = ""
        split = link.find(" ")
        if split != -1:
            value = lstrip(link[split:])
            link = rstrip(link[:split])

        if not link:
            return None, end
        return StyledText(style=_LINK_STYLES[opener], value=value, link=link), end
