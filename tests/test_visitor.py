"""Tests for BaseVisitor and transform."""

import dataclasses

import pytest

from rivit import (
    BaseVisitor,
    Document,
    Embed,
    Header,
    ListItem,
    Node,
    Paragraph,
    StyledText,
    TextStyle,
    parse,
    transform,
)

SOURCE = """
INDEX
See [https://a.example A] and {notes}.
@ map.png [https://b.example source]
- [https://c.example C]
-- {child}
"""


class LinkCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.links: list[tuple[TextStyle, str]] = []

    def visit_styled_text(self, node: StyledText) -> None:
        if node.style.is_link:
            self.links.append((node.style, node.link))


class KindCounter(BaseVisitor[None]):
    def __init__(self) -> None:
        self.counts: dict[str, int] = {}

    def visit_default(self, node: Node) -> None:
        name = type(node).__name__
        self.counts[name] = self.counts.get(name, 0) + 1


class TestBaseVisitor:
    """Dispatch and automatic child walking."""

    def test_collects_links_everywhere(self) -> None:
        """Paragraph runs, embed alt text, item values and sublists are walked."""
        collector = LinkCollector()
        collector.visit(parse(SOURCE))

        assert collector.links == [
            (TextStyle.EXTERNAL_LINK, "https://a.example"),
            (TextStyle.INTERNAL_LINK, "notes"),
            (TextStyle.EXTERNAL_LINK, "https://b.example"),
            (TextStyle.EXTERNAL_LINK, "https://c.example"),
            (TextStyle.INTERNAL_LINK, "child"),
        ]

    def test_default_fallback(self) -> None:
        counter = KindCounter()
        counter.visit(parse(SOURCE))

        assert counter.counts["Document"] == 1
        assert counter.counts["Header"] == 1
        assert counter.counts["Embed"] == 1
        assert counter.counts["ListItem"] == 2
        assert counter.counts["List"] == 2

    def test_visit_returns_dispatch_result(self) -> None:
        class HeaderText(BaseVisitor[str]):
            def visit_header(self, node: Header) -> str:
                return node.content

        assert HeaderText().visit(Header(content="X")) == "X"


class TestTransform:
    """Bottom-up immutable rewriting."""

    def test_remove_embeds(self) -> None:
        doc = parse(SOURCE)
        new_doc = transform(doc, lambda n: None if isinstance(n, Embed) else n)

        assert len(new_doc) == len(doc) - 1
        assert not any(isinstance(line, Embed) for line in new_doc)
        assert any(isinstance(line, Embed) for line in doc)

    def test_rewrite_runs(self) -> None:
        def shout(node: Node) -> Node:
            if isinstance(node, StyledText) and node.style is TextStyle.NONE:
                return dataclasses.replace(node, value=node.value.upper())
            return node

        doc = parse("hello *there*")
        new_doc = transform(doc, shout)

        assert new_doc[0] == Paragraph(
            children=(
                StyledText(value="HELLO "),
                StyledText(style=TextStyle.ITALIC, value="there"),
            )
        )

    def test_removing_sublist_leaves_empty_list(self) -> None:
        doc = parse("- a\n-- b")

        def drop_nested(node: Node) -> Node | None:
            if isinstance(node, ListItem) and node.level > 1:
                return None
            return node

        new_doc = transform(doc, drop_nested)
        assert len(new_doc[0][0].sublist) == 0

    def test_identity_returns_equal_tree(self) -> None:
        doc = parse(SOURCE)
        assert transform(doc, lambda n: n) == doc

    def test_root_cannot_be_removed(self) -> None:
        with pytest.raises(TypeError):
            transform(Document(), lambda n: None)
