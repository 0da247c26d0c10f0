"""HTML snapshot parser used to evaluate descriptors offline."""

from dataclasses import dataclass, field

import lxml.html
from bs4 import BeautifulSoup, Tag
from lxml import etree

from ..locators.descriptors import TESTID_ATTRIBUTE


@dataclass
class DOMElement:
    """An element found in a snapshot."""

    tag: str
    id: str | None = None
    text: str | None = None
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def data_testid(self) -> str | None:
        """Get data-testid attribute if present."""
        return self.attributes.get(TESTID_ATTRIBUTE)


class HTMLParser:
    """Parse a saved page and look elements up the way the resolver would."""

    def __init__(self, html: str):
        self.html = html
        self.soup = BeautifulSoup(html, "lxml")
        self._tree = None

    def find_by_data_testid(self, testid: str) -> list[DOMElement]:
        """Find elements by data-testid attribute."""
        tags = self.soup.find_all(attrs={TESTID_ATTRIBUTE: testid})
        return [self._tag_to_element(t) for t in tags if isinstance(t, Tag)]

    def find_by_text(self, text: str) -> list[DOMElement]:
        """
        Find the innermost elements whose text contains ``text``.

        Case-insensitive substring match, mirroring Playwright's get_by_text.
        """
        needle = " ".join(text.split()).lower()
        results = []
        for tag in self.soup.find_all(True):
            if not isinstance(tag, Tag) or tag.name in ("html", "head", "script", "style"):
                continue
            content = " ".join(tag.get_text(" ").split()).lower()
            if needle not in content:
                continue
            # Skip ancestors when a child already holds the text
            if any(
                needle in " ".join(child.get_text(" ").split()).lower()
                for child in tag.find_all(True, recursive=False)
            ):
                continue
            results.append(self._tag_to_element(tag))
        return results

    def find_by_css(self, css_selector: str) -> list[DOMElement]:
        """Find elements matching a CSS selector."""
        tags = self.soup.select(css_selector)
        return [self._tag_to_element(t) for t in tags if isinstance(t, Tag)]

    def find_by_xpath(self, expression: str) -> list[DOMElement]:
        """Find elements matching an XPath expression."""
        if self._tree is None:
            self._tree = lxml.html.fromstring(self.html)
        nodes = self._tree.xpath(expression)
        return [
            DOMElement(
                tag=node.tag,
                id=node.get("id"),
                text=(node.text or "").strip() or None,
                attributes={k: v for k, v in node.attrib.items() if k != "id"},
            )
            for node in nodes
            if isinstance(node, etree._Element)
        ]

    def _tag_to_element(self, tag: Tag) -> DOMElement:
        """Convert a BeautifulSoup Tag to a DOMElement."""
        return DOMElement(
            tag=tag.name,
            id=tag.get("id"),
            text=tag.get_text(" ", strip=True) or None,
            attributes={
                k: " ".join(v) if isinstance(v, list) else str(v)
                for k, v in tag.attrs.items()
                if k != "id"
            },
        )
