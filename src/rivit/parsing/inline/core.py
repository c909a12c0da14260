"""Core inline scanning for Rivit.

Dispatches on the character at the current position and delegates each
styled construct to its mixin. Every construct scans forward only, so a
line is tokenized in a single left-to-right pass.

Thread Safety:
All methods are stateless; safe for concurrent use.

"""

from rivit.nodes import StyledText
from rivit.parsing.charsets import EMPHASIS_DELIMITER, LINK_CLOSERS, MONO_DELIMITER


class InlineParsingCoreMixin:
    """Core inline scanning methods.

    Required Host Methods (from other mixins):
        - _parse_emphasis(line, pos) -> tuple[StyledText | None, int]
        - _parse_mono(line, pos) -> tuple[StyledText | None, int]
        - _parse_link(line, pos) -> tuple[StyledText | None, int]
        - _parse_plain(line, pos) -> tuple[StyledText | None, int]

    """

    def _parse_inline(self, line: str) -> tuple[StyledText, ...]:
        """Tokenize one logical line into styled runs.

        Runs with empty values (and links with empty targets) are dropped.
        """
        if not line:
            return ()

        runs: list[StyledText] = []
        pos = 0
        line_len = len(line)

        while pos < line_len:
            char = line[pos]
            if char == EMPHASIS_DELIMITER:
                run, pos = self._parse_emphasis(line, pos)
            elif char == MONO_DELIMITER:
                run, pos = self._parse_mono(line, pos)
            elif char in LINK_CLOSERS:
                run, pos = self._parse_link(line, pos)
            else:
                run, pos = self._parse_plain(line, pos)

            if run is not None:
                runs.append(run)

        return tuple(runs)

    def _scan_delimited(self, line: str, start: int, closer: str) -> tuple[str, int]:
        """Find ``closer`` at or after ``start``.

        Returns the text between ``start`` and the closer, plus the position
        just past the closer. An unterminated run takes the rest of the line.
        """
        close = line.find(closer, start)
        if close == -1:
            return line[start:], len(line)
        return line[start:close], close + len(closer)

