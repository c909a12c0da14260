"""Line-oriented parser producing typed Rivit nodes.

Splits the source into lines and classifies each one by its leading
delimiter. Produces immutable (frozen) dataclass nodes.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `BlockParsingMixin`: line classification, lists, indented blocks
- `InlineParsingMixin`: styled runs within a line (emphasis, mono, links)

Thread Safety:
- Parser produces immutable nodes (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- Safe to share the resulting document across threads

"""

from __future__ import annotations

from rivit.config import ParseConfig, get_parse_config
from rivit.nodes import Line, StyledText
from rivit.parsing import BlockParsingMixin, InlineParsingMixin
from rivit.parsing.charsets import rstrip
from rivit.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    InlineParsingMixin,
    BlockParsingMixin,
):
    """Parser for Rivit source text.

    Usage:
        >>> parser = Parser("HELLO\\n\\nSome *text*")
        >>> parser.parse()
        [Header(content='HELLO'), Paragraph(children=(...))]

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. Configuration is read from ContextVar (thread-local).

    """

    __slots__ = (
        "_source",
        "_lines",
        "_pos",
    )

    def __init__(self, source: str) -> None:
        """Initialize parser with source text.

        Configuration is read from ContextVar, not passed as parameters.
        Use set_parse_config() or parse_config_context() before calling
        parse() if you need non-default configuration.

        Args:
            source: Rivit source text

        """
        self._source = source
        self._lines: list[str] = []
        self._pos = 0

    @property
    def _config(self) -> ParseConfig:
        """Get current parse configuration (thread-local)."""
        return get_parse_config()

    def parse(self) -> list[Line]:
        """Parse the source into line constructs.

        Blank lines, comments and constructs that degrade to nothing are
        dropped. Never raises for any input string.

        Returns:
            Line nodes in source order
        """
        source = self._source
        if self._config.normalize_newlines:
            source = source.replace("\r\n", "\n").replace("\r", "\n")

        self._lines = source.split("\n")
        self._pos = 0

        parsed: list[Line] = []
        line_count = len(self._lines)
        while self._pos < line_count:
            raw = self._lines[self._pos]
            self._pos += 1

            line = rstrip(raw)
            if not line:
                continue

            node = self._parse_line(line)
            if node is not None:
                parsed.append(node)

        logger.debug("Parsed %d lines into %d constructs", line_count, len(parsed))
        return parsed

    def parse_inline(self, line: str) -> tuple[StyledText, ...]:
        """Tokenize a single line of inline content."""
        return self._parse_inline(line)
