"""Italic, bold and mono runs.

Rivit emphasis has no flanking rules or nesting: the opener is matched
with the next closer of the same kind, and everything in between is taken
literally (escapes are not processed inside styled runs).

"""

from rivit.nodes import StyledText, TextStyle
from rivit.parsing.charsets import EMPHASIS_DELIMITER, MONO_DELIMITER, strip


class EmphasisMixin:
    """Mixin for ``*italic*``, ``**bold**`` and ```mono``` runs."""

    def _scan_delimited(self, line: str, start: int, closer: str) -> tuple[str, int]:
        """Find closer. Implemented by InlineParsingCoreMixin."""
        raise NotImplementedError

    def _parse_emphasis(self, line: str, pos: int) -> tuple[StyledText | None, int]:
        """Parse an italic or bold run starting at ``*``.

        A doubled ``**`` opens bold and closes at the next ``**``; a single
        ``*`` opens italic and closes at the next ``*``.
        """
        if line.startswith(EMPHASIS_DELIMITER * 2, pos):
            style = TextStyle.BOLD
            inner, end = self._scan_delimited(line, pos + 2, EMPHASIS_DELIMITER * 2)
        else:
            style = TextStyle.ITALIC
            inner, end = self._scan_delimited(line, pos + 1, EMPHASIS_DELIMITER)

        text = strip(inner)
        if not text:
            return None, end
        return StyledText(style=style, value=text), end

    def _parse_mono(self, line: str, pos: int) -> tuple[StyledText | None, int]:
        """Parse a mono run starting at a backtick."""
        inner, end = self._scan_delimited(line, pos + 1, MONO_DELIMITER)

        text = strip(inner)
        if not text:
            return None, end
        return StyledText(style=TextStyle.MONO, value=text), end
