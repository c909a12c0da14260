"""Typed document nodes for Rivit.

All nodes are frozen dataclasses with slots for:
- Immutability: a parsed document can be shared across threads
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: match statements work naturally on variants

Node Hierarchy:
Node (base)
├── Document
├── Line (closed set of line-level constructs, dispatched on ``kind``)
│   ├── Header
│   ├── NavLink
│   ├── Paragraph
│   ├── Embed
│   ├── Block
│   └── List
├── ListItem
└── StyledText

Documents own every string they hold; the source text is not referenced
after parsing.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar


class LineKind(Enum):
    """Tag identifying a Line variant."""

    HEADER = auto()
    NAV_LINK = auto()
    PARAGRAPH = auto()
    BLOCK = auto()
    LIST = auto()
    EMBED = auto()


class TextStyle(Enum):
    """Style of an inline run."""

    NONE = auto()
    ITALIC = auto()
    BOLD = auto()
    MONO = auto()
    INTERNAL_LINK = auto()  # {target display}
    EXTERNAL_LINK = auto()  # [target display]

    @property
    def is_link(self) -> bool:
        return self in (TextStyle.INTERNAL_LINK, TextStyle.EXTERNAL_LINK)


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all document nodes."""


# =============================================================================
# Inline
# =============================================================================


@dataclass(frozen=True, slots=True)
class StyledText(Node):
    """One inline run within a line.

    ``link`` is only set for the two link styles. A link may have an empty
    ``value``, meaning it displays its own target.

    """

    style: TextStyle = TextStyle.NONE
    value: str = ""
    link: str = ""


# =============================================================================
# Lines
# =============================================================================


@dataclass(frozen=True, slots=True)
class Line(Node):
    """Base class for line-level constructs.

    Callers dispatch on ``kind`` (or use ``match``) and read the payload
    of the concrete variant.

    """

    kind: ClassVar[LineKind]


@dataclass(frozen=True, slots=True)
class Header(Line):
    """A line whose Latin letters are all uppercase.

    Rivit: THIS IS A HEADER

    """

    kind: ClassVar[LineKind] = LineKind.HEADER

    content: str


@dataclass(frozen=True, slots=True)
class NavLink(Line):
    """A bare navigation link target.

    Rivit: / target

    """

    kind: ClassVar[LineKind] = LineKind.NAV_LINK

    target: str


@dataclass(frozen=True, slots=True)
class Paragraph(Line):
    """A line of flowing prose with inline styling."""

    kind: ClassVar[LineKind] = LineKind.PARAGRAPH

    children: tuple[StyledText, ...]


@dataclass(frozen=True, slots=True)
class Embed(Line):
    """A media embed reference with optional styled alt text.

    Rivit: @ path alt text

    """

    kind: ClassVar[LineKind] = LineKind.EMBED

    path: str
    alt: tuple[StyledText, ...] = ()


@dataclass(frozen=True, slots=True)
class Block(Line):
    """A verbatim indented block.

    ``body`` holds the original source lines, leading whitespace included.
    ``indent`` is the leading space (or tab) count of the first line.

    """

    kind: ClassVar[LineKind] = LineKind.BLOCK

    indent: int
    body: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class List(Line):
    """A bulleted list; items own their sublists, forming a tree."""

    kind: ClassVar[LineKind] = LineKind.LIST

    items: tuple[ListItem, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[ListItem]:
        return iter(self.items)

    def __getitem__(self, index: int) -> ListItem:
        return self.items[index]


@dataclass(frozen=True, slots=True)
class ListItem(Node):
    """A list entry.

    ``level`` is the dash count of the source line (top-level items are 1).

    """

    level: int
    value: tuple[StyledText, ...] = ()
    sublist: List = field(default_factory=List)


# =============================================================================
# Document
# =============================================================================


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root node: the ordered line constructs of one source."""

    children: tuple[Line, ...] = ()

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.children)

    def __getitem__(self, index: int) -> Line:
        return self.children[index]
