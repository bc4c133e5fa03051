from __future__ import annotations
from bs4 import BeautifulSoup
from bs4.builder import builder_registry

_SKIP_TAGS = ("script", "style", "noscript", "template")

def _soup(html: str) -> BeautifulSoup:
    if builder_registry.lookup("lxml") is not None:
        return BeautifulSoup(html, "lxml")
    return BeautifulSoup(html, "html.parser")

def html_to_text(html: str) -> str:
    """Visible text of an HTML document, block text joined by single spaces."""
    if not html:
        return ""
    soup = _soup(html)
    for el in soup(_SKIP_TAGS):
        el.decompose()
    return " ".join(soup.get_text(" ", strip=True).split())
