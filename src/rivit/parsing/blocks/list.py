"""List parsing for Rivit.

A list starts at a ``-`` line and continues over following raw lines that
begin with ``-``. The dash count is the item level. Items are collected as
mutable drafts and frozen into the immutable node tree once the list ends.

Nesting modes (ParseConfig.list_nesting):

compat
    Level 1 items go to the root and become the current parent. Level 2
    items go to the current parent's sublist and become the current item.
    Level 3+ items go to the current item's sublist; the current item does
    not move, so consecutive deep items are siblings.

depth
    Each item attaches to the nearest preceding item with a smaller level,
    or to the root when there is none.

"""

from __future__ import annotations

from dataclasses import dataclass, field

from rivit.config import ParseConfig
from rivit.nodes import List, ListItem, StyledText
from rivit.parsing.charsets import LIST_DELIMITER, count_prefix, lstrip
from rivit.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class _DraftItem:
    """Mutable list item used while the list is still growing."""

    level: int
    value: tuple[StyledText, ...]
    children: list[_DraftItem] = field(default_factory=list)

    def freeze(self) -> ListItem:
        return ListItem(
            level=self.level,
            value=self.value,
            sublist=List(items=tuple(child.freeze() for child in self.children)),
        )


class _CompatNesting:
    """Current-parent/current-item placement."""

    __slots__ = ("_roots", "_parent", "_current")

    def __init__(self, roots: list[_DraftItem], first: _DraftItem) -> None:
        self._roots = roots
        self._parent = first
        self._current = first

    def place(self, item: _DraftItem) -> None:
        if item.level == 1:
            self._roots.append(item)
            self._parent = item
            self._current = item
        elif item.level == 2:
            self._parent.children.append(item)
            self._current = item
        else:
            self._current.children.append(item)


class _DepthNesting:
    """Stack placement: attach to the nearest shallower item."""

    __slots__ = ("_roots", "_stack")

    def __init__(self, roots: list[_DraftItem], first: _DraftItem) -> None:
        self._roots = roots
        self._stack = [first]

    def place(self, item: _DraftItem) -> None:
        stack = self._stack
        while stack and stack[-1].level >= item.level:
            stack.pop()
        if stack:
            stack[-1].children.append(item)
        else:
            self._roots.append(item)
        stack.append(item)


class ListParsingMixin:
    """Mixin for multi-line list parsing.

    Required Host Attributes:
        - _lines: list[str]
        - _pos: int
        - _config: ParseConfig

    Required Host Methods:
        - _parse_inline(line) -> tuple[StyledText, ...]

    """

    _lines: list[str]
    _pos: int

    @property
    def _config(self) -> ParseConfig:
        """Active parse configuration. Implemented by Parser."""
        raise NotImplementedError

    def _parse_inline(self, line: str) -> tuple[StyledText, ...]:
        """Tokenize inline content. Implemented by InlineParsingMixin."""
        raise NotImplementedError

    def _parse_list(self, line: str) -> List | None:
        """Parse a list whose first line is ``line``.

        An opening line with no text after its dashes is skipped and does not
        start a list. Continuation lines with no text are consumed and ignored.
        The list ends at the first raw line that is empty or does not begin
        with ``-``.
        """
        level = count_prefix(line, LIST_DELIMITER)
        text = lstrip(line[level:])
        if not text:
            logger.debug("Skipping empty list item on line %d", self._pos)
            return None

        first = _DraftItem(level=level, value=self._parse_inline(text))
        roots = [first]
        if self._config.list_nesting == "depth":
            nesting: _CompatNesting | _DepthNesting = _DepthNesting(roots, first)
        else:
            nesting = _CompatNesting(roots, first)

        lines = self._lines
        end = self._pos
        while end < len(lines):
            raw = lines[end]
            if not raw or raw[0] != LIST_DELIMITER:
                break

            end += 1
            sub_level = count_prefix(raw, LIST_DELIMITER)
            text = lstrip(raw[sub_level:])
            if not text:
                logger.debug("Skipping empty list item on line %d", end)
                continue

            nesting.place(_DraftItem(level=sub_level, value=self._parse_inline(text)))

        self._pos = end
        return List(items=tuple(item.freeze() for item in roots))
