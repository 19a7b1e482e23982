"""Static renderer: serializes a page tree to HTML text."""

from bs4 import BeautifulSoup


def render_to_static_markup(document: BeautifulSoup) -> str:
    """Return *document* as HTML text, with no scripts or hydration hooks added."""
    return document.decode(formatter="html5")
