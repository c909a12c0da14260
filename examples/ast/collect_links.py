"""Typed document walk: list every link target on a page."""

from rivit import parse
from rivit.nodes import StyledText, TextStyle
from rivit.visitor import BaseVisitor


class LinkCollector(BaseVisitor[None]):
    """Collect internal and external link targets in document order."""

    def __init__(self) -> None:
        self.internal: list[str] = []
        self.external: list[str] = []

    def visit_styled_text(self, node: StyledText) -> None:
        if node.style is TextStyle.INTERNAL_LINK:
            self.internal.append(node.link)
        elif node.style is TextStyle.EXTERNAL_LINK:
            self.external.append(node.link)


source = """
LINKS
See {guide the guide} and [https://example.org example].
@ map.png [https://maps.example source]
- {faq}
-- [https://status.example status page]
"""

collector = LinkCollector()
collector.visit(parse(source))

print("Internal:", ", ".join(collector.internal))
print("External:", ", ".join(collector.external))
