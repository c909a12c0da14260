"""Parse a Rivit page and print each line construct."""

from rivit import parse

source = """
WELCOME
/ index
Rivit keeps *markup* small: **bold**, `mono`, {notes links} and [https://example.org links].
@ banner.png the site **banner**
- first
-- nested
"""

for line in parse(source):
    print(f"{line.kind.name:<10} {line!r}")
