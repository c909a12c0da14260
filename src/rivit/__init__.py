"""
Rivit: parser for a strict, line-oriented lightweight markup language.

Every line is classified by its first character; prose lines carry inline
styling. Parsing never fails: malformed constructs degrade gracefully.

Quick Start:
    >>> from rivit import parse
    >>> doc = parse("WELCOME\\n/ home\\nSome *styled* text")
    >>> [line.kind for line in doc]
    [<LineKind.HEADER: 1>, <LineKind.NAV_LINK: 2>, <LineKind.PARAGRAPH: 3>]

    >>> from rivit import parse_inline
    >>> parse_inline("see {index the index}")
    (StyledText(style=<TextStyle.NONE: 1>, value='see ', link=''), ...)

    >>> # Or reuse one configuration across many sources
    >>> from rivit import Rivit, ParseConfig
    >>> riv = Rivit(ParseConfig(list_nesting="depth"))
    >>> docs = riv.parse_many(["- a\\n-- b", "- c"])

Installation:
    pip install rivit    # zero runtime dependencies
"""

from collections.abc import Iterable

from rivit.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from rivit.errors import ConfigError, RivitError, SerializationError
from rivit.nodes import (
    Block,
    Document,
    Embed,
    Header,
    Line,
    LineKind,
    List,
    ListItem,
    NavLink,
    Node,
    Paragraph,
    StyledText,
    TextStyle,
)
from rivit.parser import Parser
from rivit.serialization import from_dict, from_json, to_dict, to_json
from rivit.visitor import BaseVisitor, transform

__version__ = "0.1.0"


def parse(source: str, *, config: ParseConfig | None = None) -> Document:
    """Parse Rivit source into a document.

    Args:
        source: Rivit source text
        config: Parse configuration (defaults to the active context config)

    Returns:
        Document holding the line constructs in source order

    Example:
        >>> doc = parse("TITLE\\nBody text")
        >>> doc[0]
        Header(content='TITLE')
    """
    with parse_config_context(config or get_parse_config()):
        return Document(children=tuple(Parser(source).parse()))


def parse_inline(line: str, *, config: ParseConfig | None = None) -> tuple[StyledText, ...]:
    """Parse a single line of inline content into styled runs.

    Example:
        >>> parse_inline("**bold**")
        (StyledText(style=<TextStyle.BOLD: 3>, value='bold', link=''),)
    """
    with parse_config_context(config or get_parse_config()):
        return Parser(line).parse_inline(line)


class Rivit:
    """Reusable parser front-end bound to one configuration.

    Usage:
        >>> riv = Rivit()
        >>> doc = riv.parse("- one\\n- two")
        >>> doc[0].kind
        <LineKind.LIST: 5>

    Thread Safety:
        Sets config via ContextVar for the duration of each call. Safe to use
        one instance from several threads.

    """

    __slots__ = ("_config",)

    def __init__(self, config: ParseConfig | None = None) -> None:
        self._config = config or ParseConfig()

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, source: str) -> Document:
        return self.parse(source)

    def parse(self, source: str) -> Document:
        """Parse Rivit source into a document."""
        return parse(source, config=self._config)

    def parse_inline(self, line: str) -> tuple[StyledText, ...]:
        """Parse a single line of inline content."""
        return parse_inline(line, config=self._config)

    def parse_many(self, sources: Iterable[str]) -> list[Document]:
        """Parse multiple sources into documents.

        Sets config once, parses all, restores the previous config once.

        Example:
            >>> riv = Rivit()
            >>> docs = riv.parse_many(["DOC ONE", "DOC TWO"])
        """
        with parse_config_context(self._config):
            return [Document(children=tuple(Parser(source).parse())) for source in sources]


__all__ = [  # noqa: RUF022, grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "parse",
    "parse_inline",
    "Rivit",
    # Nodes
    "Node",
    "Document",
    "Line",
    "LineKind",
    "Header",
    "NavLink",
    "Paragraph",
    "Embed",
    "Block",
    "List",
    "ListItem",
    "StyledText",
    "TextStyle",
    # Parser
    "Parser",
    # Traversal
    "BaseVisitor",
    "transform",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "RivitError",
    "ConfigError",
    "SerializationError",
]
