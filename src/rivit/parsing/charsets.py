"""Character sets and primitives for line and inline classification.

All sets are frozensets for O(1) membership testing and are built once at
import time, so they are safe to share across threads.

Whitespace follows the Unicode ``White_Space`` property: ASCII whitespace,
NEL, and every ``Zs`` space separator plus the line/paragraph separators.

Usage:
    from rivit.parsing.charsets import WHITESPACE_CHARS, count_prefix

    line = raw.rstrip(WHITESPACE_CHARS)
    level = count_prefix(line, LIST_DELIMITER)
"""

import unicodedata
from bisect import bisect_right

# Line delimiters (first character of a trimmed line)
COMMENT_DELIMITER = "#"
NAV_LINK_DELIMITER = "/"
EMBED_DELIMITER = "@"
LIST_DELIMITER = "-"
BLOCK_DELIMITERS: frozenset[str] = frozenset(" \t")

# Inline delimiters
EMPHASIS_DELIMITER = "*"
MONO_DELIMITER = "`"
ESCAPE_CHAR = "\\"
LINK_CLOSERS: dict[str, str] = {"{": "}", "[": "]"}

# Characters that end a plain run when followed by non-whitespace
INLINE_SPECIAL: frozenset[str] = frozenset("*`{[")

# Unicode White_Space: ASCII controls, NEL, Zs separators, LS and PS
WHITESPACE_CHARS = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)
WHITESPACE: frozenset[str] = frozenset(WHITESPACE_CHARS)

ASCII_UPPERCASE: frozenset[str] = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
ASCII_LOWERCASE: frozenset[str] = frozenset("abcdefghijklmnopqrstuvwxyz")


def is_whitespace(char: str) -> bool:
    """Check if character is Unicode whitespace."""
    return char in WHITESPACE


def strip(text: str) -> str:
    """Trim Unicode whitespace from both ends."""
    return text.strip(WHITESPACE_CHARS)


def lstrip(text: str) -> str:
    """Trim leading Unicode whitespace."""
    return text.lstrip(WHITESPACE_CHARS)


def rstrip(text: str) -> str:
    """Trim trailing Unicode whitespace."""
    return text.rstrip(WHITESPACE_CHARS)


def count_prefix(text: str, delim: str) -> int:
    """Count consecutive leading occurrences of a single-character delimiter."""
    count = 0
    for char in text:
        if char != delim:
            break
        count += 1
    return count


# Latin script ranges (Unicode Scripts.txt, Script=Latin), inclusive, sorted
_LATIN_RANGES: tuple[tuple[int, int], ...] = (
    (0x0041, 0x005A),
    (0x0061, 0x007A),
    (0x00AA, 0x00AA),
    (0x00BA, 0x00BA),
    (0x00C0, 0x00D6),
    (0x00D8, 0x00F6),
    (0x00F8, 0x02B8),
    (0x02E0, 0x02E4),
    (0x1D00, 0x1D25),
    (0x1D2C, 0x1D5C),
    (0x1D62, 0x1D65),
    (0x1D6B, 0x1D77),
    (0x1D79, 0x1DBE),
    (0x1E00, 0x1EFF),
    (0x2071, 0x2071),
    (0x207F, 0x207F),
    (0x2090, 0x209C),
    (0x212A, 0x212B),
    (0x2132, 0x2132),
    (0x214E, 0x214E),
    (0x2160, 0x2188),
    (0x2C60, 0x2C7F),
    (0xA722, 0xA787),
    (0xA78B, 0xA7CD),
    (0xA7D0, 0xA7D1),
    (0xA7D3, 0xA7D3),
    (0xA7D5, 0xA7DC),
    (0xA7F2, 0xA7FF),
    (0xAB30, 0xAB5A),
    (0xAB5C, 0xAB64),
    (0xAB66, 0xAB69),
    (0xFB00, 0xFB06),
    (0xFF21, 0xFF3A),
    (0xFF41, 0xFF5A),
    (0x10780, 0x10785),
    (0x10787, 0x107B0),
    (0x107B2, 0x107BA),
    (0x1DF00, 0x1DF1E),
    (0x1DF25, 0x1DF2A),
)
_LATIN_STARTS: tuple[int, ...] = tuple(start for start, _ in _LATIN_RANGES)


def is_latin(char: str) -> bool:
    """Check if character belongs to the Latin script.

    Covers letters, ordinal indicators, modifier letters and Roman numerals,
    not only characters named ``LATIN ...``.

    """
    if char in ASCII_UPPERCASE or char in ASCII_LOWERCASE:
        return True
    if char < "\x80":
        return False
    code = ord(char)
    index = bisect_right(_LATIN_STARTS, code) - 1
    return index >= 0 and code <= _LATIN_RANGES[index][1]


def is_upper(char: str) -> bool:
    """Check if character is an uppercase letter (category Lu).

    Stricter than ``str.isupper``, which also accepts Other_Uppercase
    characters such as Roman numerals and circled letters.

    """
    if char in ASCII_UPPERCASE:
        return True
    if char < "\x80":
        return False
    return unicodedata.category(char) == "Lu"
