"""Plain text runs and backslash escapes.

A plain run continues until end of line or until an inline delimiter
(``*``, `````, ``{``, ``[``) is directly followed by a character other
than ASCII whitespace. A delimiter followed by ASCII whitespace (or ending
the line) stays literal text; a non-ASCII space such as U+00A0 or U+3000
after it still opens a styled run.

Escapes:
    ``\\X`` emits X literally and drops the backslash, unless X is ASCII
    whitespace, in which case the backslash is kept. A backslash ending
    the line is kept. The escaped character never ends the run.

"""

from rivit.nodes import StyledText
from rivit.parsing.charsets import ESCAPE_CHAR, INLINE_SPECIAL, is_whitespace


class PlainTextMixin:
    """Mixin for unstyled text with escapes applied."""

    def _parse_plain(self, line: str, pos: int) -> tuple[StyledText | None, int]:
        """Accumulate a plain run starting at ``pos``.

        Returns the run (escapes applied) and the position where the next
        construct starts.
        """
        parts: list[str] = []
        start = pos
        end = pos
        line_len = len(line)

        while end < line_len:
            char = line[end]

            if char == ESCAPE_CHAR and end + 1 < line_len:
                escaped = line[end + 1]
                # Non-ASCII characters are always escaped, even spaces
                if escaped >= "\x80" or not is_whitespace(escaped):
                    parts.append(line[start:end])
                    parts.append(escaped)
                    end += 2
                    start = end
                else:
                    end += 1
                continue

            if char in INLINE_SPECIAL and end + 1 < line_len:
                follower = line[end + 1]
                # Only ASCII whitespace keeps the delimiter literal
                if follower >= "\x80" or not is_whitespace(follower):
                    break

            end += 1

        parts.append(line[start:end])
        text = "".join(parts)
        if not text:
            return None, end
        return StyledText(value=text), end
