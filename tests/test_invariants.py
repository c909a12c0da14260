"""Property-based tests for parser invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from rivit import (
    Block,
    Document,
    Embed,
    Header,
    List,
    NavLink,
    Paragraph,
    ParseConfig,
    StyledText,
    TextStyle,
    parse,
    parse_inline,
)

MARKUP_ALPHABET = "abcXYZ 헤\t\n\\*`{}[]#/@-."

# Lines that open neither a list nor a block and contain no inline syntax
PROSE_ALPHABET = "abcdefghij klmnop.,!?0123"

# Lines that never open a list or a block, so they cannot swallow neighbours
SINGLE_LINE_ALPHABET = "abcXYZ 헤*`{}[]\\/@."

single_lines = st.text(alphabet=SINGLE_LINE_ALPHABET, max_size=30).map(str.lstrip)


def _check_runs(runs: tuple[StyledText, ...]) -> None:
    for run in runs:
        if run.style.is_link:
            assert run.link
        else:
            assert run.value
            assert run.link == ""


def _check_list(lst: List, *, allow_empty: bool = False) -> None:
    assert allow_empty or len(lst) > 0
    for item in lst:
        assert item.level >= 1
        _check_runs(item.value)
        _check_list(item.sublist, allow_empty=True)


def _check_document(doc: Document) -> None:
    for line in doc:
        match line:
            case Header(content=content):
                assert content
            case NavLink(target=target):
                assert target
            case Paragraph(children=children):
                _check_runs(children)
            case Embed(path=path, alt=alt):
                assert path
                _check_runs(alt)
            case Block(indent=indent, body=body):
                assert indent >= 1
                assert body
            case List():
                _check_list(line)
            case _:
                raise AssertionError(f"unexpected node {line!r}")


class TestStructuralInvariants:
    """Invariants of every parsed document."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_any_text_parses(self, source: str) -> None:
        """Parsing never raises and every construct carries content."""
        _check_document(parse(source))

    @given(st.text(alphabet=MARKUP_ALPHABET, max_size=300))
    @settings(max_examples=200)
    def test_markup_heavy_text_parses(self, source: str) -> None:
        _check_document(parse(source))
        _check_document(parse(source, config=ParseConfig(list_nesting="depth")))

    @given(st.text(max_size=200))
    @settings(max_examples=100)
    def test_inline_runs_are_never_empty(self, line: str) -> None:
        _check_runs(parse_inline(line))

    @given(st.text(alphabet=MARKUP_ALPHABET, max_size=200))
    @settings(max_examples=50)
    def test_repeated_parse_identical(self, source: str) -> None:
        assert parse(source) == parse(source)

    @given(st.text(alphabet="-ab \n", max_size=200))
    @settings(max_examples=100)
    def test_top_level_items_keep_dash_count(self, source: str) -> None:
        for line in parse(source):
            if isinstance(line, List):
                for item in line:
                    assert item.level >= 1


class TestElision:
    """Comments and blank lines between single-line constructs."""

    @given(st.lists(st.tuples(single_lines, st.booleans(), st.text(max_size=10)), max_size=20))
    @settings(max_examples=100)
    def test_comment_lines_do_not_change_output(
        self, rows: list[tuple[str, bool, str]]
    ) -> None:
        plain = "\n".join(line for line, _, _ in rows)
        commented = "\n".join(
            f"{line}\n#{comment.replace(chr(10), ' ')}" if add else line
            for line, add, comment in rows
        )
        assert parse(commented) == parse(plain)

    @given(st.lists(st.tuples(single_lines, st.integers(min_value=0, max_value=3)), max_size=20))
    @settings(max_examples=100)
    def test_blank_lines_do_not_change_output(self, rows: list[tuple[str, int]]) -> None:
        plain = "\n".join(line for line, _ in rows)
        spaced = "\n".join(line + "\n" * blanks for line, blanks in rows)
        assert parse(spaced) == parse(plain)


class TestPlainText:
    """Text without any delimiter characters."""

    @given(st.lists(st.text(alphabet=PROSE_ALPHABET, max_size=40).map(str.lstrip), max_size=20))
    @settings(max_examples=100)
    def test_plain_lines_become_single_run_paragraphs(self, lines: list[str]) -> None:
        doc = parse("\n".join(lines))

        expected = tuple(
            Paragraph(children=(StyledText(value=line.rstrip()),))
            for line in lines
            if line.strip()
        )
        assert doc.children == expected


class TestHeaderPredicate:
    """Header iff every Latin letter is uppercase and one exists."""

    @given(st.text(alphabet="ABCxyzÉé 0헤!'ºªʰⅫ", min_size=1, max_size=30).map(str.lstrip))
    @settings(max_examples=200)
    def test_header_predicate(self, line: str) -> None:
        doc = parse(line)
        if not line.strip():
            assert len(doc) == 0
            return

        has_latin = any(c in "ABCxyzÉéºªʰⅫ" for c in line)
        all_upper = not any(c in "xyzéºªʰⅫ" for c in line)
        assert isinstance(doc[0], Header) == (has_latin and all_upper)


class TestEscapes:
    """Escape handling on single characters."""

    @given(st.sampled_from(["*", "`", "{", "[", "\\", "}", "]"]))
    def test_escaped_ascii_is_literal(self, char: str) -> None:
        doc = parse("\\" + char)
        assert doc.children == (Paragraph(children=(StyledText(value=char),)),)

    @given(st.text(alphabet="abc*`{[", max_size=30))
    @settings(max_examples=100)
    def test_escaping_every_character_yields_plain_text(self, text: str) -> None:
        escaped = "".join("\\" + c for c in text)
        runs = parse_inline(escaped)
        if text:
            assert runs == (StyledText(style=TextStyle.NONE, value=text),)
        else:
            assert runs == ()
