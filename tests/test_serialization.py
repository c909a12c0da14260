"""Tests for rivit.serialization: document JSON round-trip."""

import json

import pytest

from rivit import SerializationError, parse
from rivit.nodes import (
    Block,
    Document,
    Embed,
    Header,
    List,
    ListItem,
    NavLink,
    Paragraph,
    StyledText,
    TextStyle,
)
from rivit.serialization import from_dict, from_json, to_dict, to_json

SOURCE = """
TITLE
/ home
Some *styled* text with {a link} and [http://x.y out].
@ pic.png the **alt**
  verbatim
    block
- one
-- two
--- three
"""


class TestToDict:
    """Shape of serialized nodes."""

    def test_styled_text(self) -> None:
        data = to_dict(StyledText(style=TextStyle.BOLD, value="x"))
        assert data == {"_type": "StyledText", "style": "BOLD", "value": "x", "link": ""}

    def test_block_body_is_list(self) -> None:
        data = to_dict(Block(indent=2, body=("  a", "  b")))
        assert data == {"_type": "Block", "indent": 2, "body": ["  a", "  b"]}

    def test_list_item_sublist(self) -> None:
        data = to_dict(ListItem(level=1))
        assert data["sublist"] == {"_type": "List", "items": []}

    def test_kind_is_not_serialized(self) -> None:
        assert "kind" not in to_dict(Header(content="X"))


class TestRoundTrip:
    """Verify round-trip serialization for every node type."""

    @pytest.mark.parametrize(
        "node",
        [
            Header(content="HEADER"),
            NavLink(target="somewhere"),
            Paragraph(children=(StyledText(value="p"),)),
            Embed(path="a.png", alt=(StyledText(style=TextStyle.ITALIC, value="i"),)),
            Block(indent=1, body=("\tcode",)),
            List(items=(ListItem(level=1, sublist=List(items=(ListItem(level=2),))),)),
        ],
    )
    def test_line_nodes(self, node) -> None:  # type: ignore[no-untyped-def]
        assert from_dict(to_dict(node)) == node

    def test_parsed_document(self) -> None:
        doc = parse(SOURCE)
        assert from_json(to_json(doc)) == doc

    def test_json_is_deterministic(self) -> None:
        doc = parse(SOURCE)
        assert to_json(doc) == to_json(parse(SOURCE))
        assert json.loads(to_json(doc, indent=2)) == json.loads(to_json(doc))

    def test_non_ascii_written_as_is(self) -> None:
        doc = parse("THIS IS A 헤더")
        assert "헤더" in to_json(doc)


class TestErrors:
    """Malformed serialized data."""

    def test_missing_type(self) -> None:
        with pytest.raises(SerializationError, match="Missing '_type'"):
            from_dict({"content": "X"})

    def test_unknown_type(self) -> None:
        with pytest.raises(SerializationError, match="Unknown node type"):
            from_dict({"_type": "Table"})

    def test_unknown_style(self) -> None:
        with pytest.raises(SerializationError, match="TextStyle"):
            from_dict({"_type": "StyledText", "style": "UNDERLINE", "value": "x", "link": ""})

    def test_missing_required_field(self) -> None:
        with pytest.raises(SerializationError, match="Header"):
            from_dict({"_type": "Header"})

    def test_invalid_json(self) -> None:
        with pytest.raises(SerializationError, match="Invalid JSON"):
            from_json("{not json")

    def test_non_document_json(self) -> None:
        with pytest.raises(SerializationError, match="Expected Document"):
            from_json(json.dumps(to_dict(Header(content="X"))))

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            from_dict({})

    def test_empty_document(self) -> None:
        assert from_json(to_json(Document())) == Document()
