"""Document visitor and transformer for Rivit.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen documents.

Collecting every external link target:

    class ExternalLinks(BaseVisitor[None]):
        def __init__(self) -> None:
            self.targets: list[str] = []

        def visit_styled_text(self, node: StyledText) -> None:
            if node.style is TextStyle.EXTERNAL_LINK:
                self.targets.append(node.link)

    collector = ExternalLinks()
    collector.visit(doc)

Dropping all embeds:

    new_doc = transform(doc, lambda node: None if isinstance(node, Embed) else node)

Thread Safety:
    Visitors are NOT shared across threads by default (they may accumulate
    mutable state). Create a new visitor per thread. The transform function
    is pure and safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable
from typing import Generic, TypeVar

from rivit.nodes import (
    Block,
    Document,
    Embed,
    Header,
    List,
    ListItem,
    NavLink,
    Node,
    Paragraph,
    StyledText,
)


T = TypeVar("T")


class BaseVisitor(Generic[T]):
    """Base document visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call.

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method."""
        return None  # type: ignore[return-value]

    def visit_document(self, node: Document) -> T:
        return self.visit_default(node)

    def visit_header(self, node: Header) -> T:
        return self.visit_default(node)

    def visit_nav_link(self, node: NavLink) -> T:
        return self.visit_default(node)

    def visit_paragraph(self, node: Paragraph) -> T:
        return self.visit_default(node)

    def visit_embed(self, node: Embed) -> T:
        return self.visit_default(node)

    def visit_block(self, node: Block) -> T:
        return self.visit_default(node)

    def visit_list(self, node: List) -> T:
        return self.visit_default(node)

    def visit_list_item(self, node: ListItem) -> T:
        return self.visit_default(node)

    def visit_styled_text(self, node: StyledText) -> T:
        return self.visit_default(node)

    def _dispatch(self, node: Node) -> T:
        match node:
            case Document():
                return self.visit_document(node)
            case Header():
                return self.visit_header(node)
            case NavLink():
                return self.visit_nav_link(node)
            case Paragraph():
                return self.visit_paragraph(node)
            case Embed():
                return self.visit_embed(node)
            case Block():
                return self.visit_block(node)
            case List():
                return self.visit_list(node)
            case ListItem():
                return self.visit_list_item(node)
            case StyledText():
                return self.visit_styled_text(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        match node:
            case Document(children=children) | Paragraph(children=children):
                for child in children:
                    self.visit(child)
            case Embed(alt=alt):
                for child in alt:
                    self.visit(child)
            case List(items=items):
                for item in items:
                    self.visit(item)
            case ListItem(value=value, sublist=sublist):
                for child in value:
                    self.visit(child)
                if sublist.items:
                    self.visit(sublist)
            case _:
                pass  # Leaf nodes


def transform(doc: Document, fn: Callable[[Node], Node | None]) -> Document:
    """Apply a function to every node in the document, returning a new tree.

    The function ``fn`` is called bottom-up: children are transformed first,
    then the parent is transformed with its new children.

    Return ``None`` from ``fn`` to remove a node from the tree. A removed
    sublist becomes an empty List. The root Document cannot be removed;
    returning None for it raises TypeError.

    Args:
        doc: The document to transform.
        fn: Function that receives a node and returns a (possibly new) node,
            or None to remove the node from the tree.

    Returns:
        A new Document with the transformation applied.

    """
    result = _transform_node(doc, fn)
    if result is None or not isinstance(result, Document):
        msg = "transform fn must return a Document for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    """Transform a single node bottom-up: children first, then self."""
    return fn(_transform_children(node, fn))


def _transform_children(node: Node, fn: Callable[[Node], Node | None]) -> Node:
    """Produce a new node with children transformed; filter out removed nodes."""

    def _filtered(children: tuple[Node, ...]) -> tuple[Node, ...]:
        return tuple(
            result for c in children
            if (result := _transform_node(c, fn)) is not None
        )

    match node:
        case Document(children=children) | Paragraph(children=children):
            new_children = _filtered(children)
            if new_children != children:
                return dataclasses.replace(node, children=new_children)
        case Embed(alt=alt):
            new_alt = _filtered(alt)
            if new_alt != alt:
                return dataclasses.replace(node, alt=new_alt)
        case List(items=items):
            new_items = _filtered(items)
            if new_items != items:
                return dataclasses.replace(node, items=new_items)
        case ListItem(value=value, sublist=sublist):
            new_value = _filtered(value)
            new_sublist = _transform_node(sublist, fn)
            if new_sublist is None:
                new_sublist = List()
            if new_value != value or new_sublist != sublist:
                return dataclasses.replace(node, value=new_value, sublist=new_sublist)
        case _:
            pass  # Leaf nodes: return as-is

    return node
