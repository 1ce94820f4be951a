"""
Parsed HTML document wrapper.
Gives extractors selector queries, readable text and sibling traversal
over a BeautifulSoup tree.
"""

from typing import List, Optional, Sequence

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from .utils.patterns import clean_whitespace

# Elements that start a new line of readable text
BLOCK_TAGS = frozenset({
    'address', 'article', 'aside', 'blockquote', 'br', 'dd', 'div', 'dl', 'dt',
    'footer', 'form', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'header', 'hr', 'li',
    'main', 'nav', 'ol', 'p', 'section', 'table', 'tbody', 'tfoot', 'thead',
    'tr', 'ul',
})

# Elements whose text is never shown to a reader
HIDDEN_TAGS = frozenset({'script', 'style', 'noscript', 'template', 'head', 'title'})


class HtmlDocument:
    """
    Read-only view over a parsed HTML page.
    """

    def __init__(self, html: str):
        self.html = html or ""
        self.soup = BeautifulSoup(self.html, 'lxml')

    def select(self, selector: str) -> List[Tag]:
        """All elements matching a CSS selector, in document order."""
        return self.soup.select(selector)

    def find_first(self, node: Tag, selector: str) -> Optional[Tag]:
        """First descendant of node matching a CSS selector."""
        return node.select_one(selector)

    def text_of(self, node: Optional[Tag]) -> str:
        """
        Readable text of a node: block elements and <br> break lines,
        whitespace inside a line is collapsed, blank lines are dropped.
        """
        if node is None:
            return ""

        parts = []
        for element in node.descendants:
            if isinstance(element, Tag):
                if element.name in BLOCK_TAGS:
                    parts.append('\n')
            elif isinstance(element, NavigableString) and not isinstance(element, PreformattedString):
                if element.parent is not None and element.parent.name in HIDDEN_TAGS:
                    continue
                parts.append(str(element))

        lines = (clean_whitespace(line) for line in ''.join(parts).split('\n'))
        return '\n'.join(line for line in lines if line)

    def next_sibling_element(self, node: Tag) -> Optional[Tag]:
        """The element immediately after node, skipping text between them."""
        return node.find_next_sibling()

    def first_sibling(self, node: Tag, names: Sequence[str]) -> Optional[Tag]:
        """First element sharing node's parent whose tag is one of names."""
        if node.parent is None:
            return None

        for sibling in node.parent.find_all(True, recursive=False):
            if sibling is not node and sibling.name in names:
                return sibling

        return None

    def json_ld_blocks(self) -> List[str]:
        """Raw contents of every JSON-LD script block."""
        blocks = []
        for script in self.soup.find_all('script', type='application/ld+json'):
            content = script.string or script.get_text()
            if content and content.strip():
                blocks.append(content)
        return blocks

    @property
    def body(self) -> Tag:
        return self.soup.body or self.soup

    def body_text(self) -> str:
        return self.text_of(self.body)

    def body_lines(self) -> List[str]:
        return self.body_text().split('\n')

    def count(self, selector: str) -> int:
        return len(self.select(selector))
