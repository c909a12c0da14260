"""Core block scanning for Rivit.

Classifies one trimmed line by its first character (the delimiter) and
builds the matching line construct. Multi-line constructs (lists and
indented blocks) consume following lines by advancing the host's line
position.

Delimiters:
    #           comment (skipped)
    /           nav link
    @           embed
    -           list (see ListParsingMixin)
    space, tab  indented block
    otherwise   header or paragraph

"""

from rivit.nodes import Block, Embed, Header, Line, NavLink, Paragraph, StyledText
from rivit.parsing.charsets import (
    BLOCK_DELIMITERS,
    COMMENT_DELIMITER,
    EMBED_DELIMITER,
    LIST_DELIMITER,
    NAV_LINK_DELIMITER,
    count_prefix,
    is_latin,
    is_upper,
    lstrip,
)
from rivit.utils.logger import get_logger

logger = get_logger(__name__)


class BlockParsingCoreMixin:
    """Line classification and single-line constructs.

    Required Host Attributes:
        - _lines: list[str]  (raw source lines)
        - _pos: int  (index of the line after the one being classified)

    Required Host Methods:
        - _parse_inline(line) -> tuple[StyledText, ...]
        - _parse_list(line) -> List | None

    """

    _lines: list[str]
    _pos: int

    def _parse_inline(self, line: str) -> tuple[StyledText, ...]:
        """Tokenize inline content. Implemented by InlineParsingMixin."""
        raise NotImplementedError

    def _parse_line(self, line: str) -> Line | None:
        """Classify a right-trimmed, non-empty line.

        Returns None for comments and for constructs that degrade to nothing.
        """
        delim = line[0]

        if delim == COMMENT_DELIMITER:
            return None
        if delim == NAV_LINK_DELIMITER:
            return self._parse_nav_link(line)
        if delim == EMBED_DELIMITER:
            return self._parse_embed(line)
        if delim == LIST_DELIMITER:
            return self._parse_list(line)
        if delim in BLOCK_DELIMITERS:
            return self._parse_block(line)
        return self._parse_header_or_paragraph(line)

    def _parse_nav_link(self, line: str) -> NavLink | None:
        target = lstrip(line[1:])
        if not target:
            logger.debug("Skipping empty nav link on line %d", self._pos)
            return None
        return NavLink(target=target)

    def _parse_embed(self, line: str) -> Embed | None:
        """Parse ``@ path alt text``.

        The path ends at the first space and is taken literally (no escape
        processing). The remainder, if any, is inline-scanned as alt text.
        """
        rest = lstrip(line[1:])
        alt_text = ""
        split = rest.find(" ")
        if split != -1:
            path = rest[:split]
            alt_text = lstrip(rest[split:])
        else:
            path = rest

        if not path:
            logger.debug("Skipping embed without path on line %d", self._pos)
            return None

        alt = self._parse_inline(alt_text) if alt_text else ()
        return Embed(path=path, alt=alt)

    def _parse_block(self, line: str) -> Block:
        """Parse an indented block starting at the current line.

        The indent is the run of the opening character (space or tab, never
        mixed) on the first line. Following lines belong to the block while
        they start with at least that many of the same character; they are
        kept verbatim.
        """
        delim = line[0]
        indent = count_prefix(line, delim)
        start = self._pos - 1
        end = start

        lines = self._lines
        while end < len(lines) and count_prefix(lines[end], delim) >= indent:
            end += 1

        self._pos = end
        return Block(indent=indent, body=tuple(lines[start:end]))

    def _parse_header_or_paragraph(self, line: str) -> Header | Paragraph:
        if _is_header(line):
            return Header(content=line)
        return Paragraph(children=self._parse_inline(line))


def _is_header(line: str) -> bool:
    """Check that every Latin-script character is an uppercase letter (Lu)
    and at least one exists.

    Ordinal indicators, modifier letters and Roman numerals are Latin but
    not uppercase. Digits, punctuation, whitespace and other scripts are
    ignored.
    """
    seen_upper = False
    for char in line:
        if is_latin(char):
            if not is_upper(char):
                return False
            seen_upper = True
    return seen_upper
