"""Post content extraction.

Picks the Create activities out of an outbox page and turns their HTML content
into light markdown suitable for a terminal.
"""

import re
from typing import Callable, List, Optional

from bs4 import (
    BeautifulSoup,
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    ProcessingInstruction,
    Tag,
)
from pydantic import BaseModel

from apread.model.activitystreams import Page

BLOCK_TAGS = frozenset(
    ["p", "div", "ul", "ol", "pre", "h1", "h2", "h3", "h4", "h5", "h6"]
)

_WHITESPACE = re.compile(r"[ \t\r\n\f]+")
_SPACE_AROUND_NEWLINE = re.compile(r" *\n *")
_EXTRA_NEWLINES = re.compile(r"\n{3,}")


class RenderedPost(BaseModel):
    """A post ready for display."""

    text: str
    published: Optional[str] = None


def _is_plain_link(text: str, href: str, classes: List[str]) -> bool:
    if "mention" in classes or "hashtag" in classes:
        return True
    if text.startswith("@") or text.startswith("#"):
        return True
    bare = href.split("://", 1)[-1].rstrip("/")
    return text.rstrip("/") in (href.rstrip("/"), bare)


def _render_node(node, preformatted: bool = False) -> str:
    if isinstance(node, (Comment, Declaration, Doctype, ProcessingInstruction)):
        return ""
    if isinstance(node, NavigableString):
        if preformatted:
            return str(node)
        return _WHITESPACE.sub(" ", str(node))
    if not isinstance(node, Tag):
        return ""

    name = node.name
    if name == "br":
        return "\n"
    if name in ("script", "style"):
        return ""

    inner_preformatted = preformatted or name == "pre"
    inner = "".join(_render_node(child, inner_preformatted) for child in node.children)

    if name in ("strong", "b") and inner.strip():
        return f"**{inner}**"
    if name in ("em", "i") and inner.strip():
        return f"*{inner}*"
    if name == "code" and not preformatted and inner.strip():
        return f"`{inner}`"
    if name == "a":
        href = node.get("href")
        text = inner.strip()
        if not href or not text or _is_plain_link(text, href, node.get("class") or []):
            return inner
        return f"[{text}]({href})"
    if name == "li":
        return f"\n* {inner.strip()}"
    if name == "blockquote":
        quoted = "\n".join(f"> {line}" for line in inner.strip().split("\n"))
        return f"\n\n{quoted}\n\n"
    if name in BLOCK_TAGS:
        return f"\n\n{inner}\n\n"
    return inner


def html_to_markdown(html: str) -> str:
    """Convert post HTML to plain text with light markdown.

    Paragraphs are separated by a blank line and ``<br>`` becomes a newline.
    Emphasis, code and list items are marked up; links whose text is the URL, a
    mention or a hashtag stay plain text, others become ``[text](href)``.

    Args:
        html: HTML fragment from an object's content

    Returns:
        The converted text, stripped of leading and trailing whitespace
    """
    soup = BeautifulSoup(html, "html.parser")
    text = "".join(_render_node(child) for child in soup.children)
    text = _SPACE_AROUND_NEWLINE.sub("\n", text)
    text = _EXTRA_NEWLINES.sub("\n\n", text)
    return text.strip()


def extract(
    page: Page, html_to_text: Callable[[str], str] = html_to_markdown
) -> List[RenderedPost]:
    """Render the Create activities of a page, skipping every other activity.

    Args:
        page: Outbox page
        html_to_text: HTML conversion capability, assumed total

    Returns:
        Rendered posts in page order
    """
    return [
        RenderedPost(text=item.markdown_content(html_to_text), published=item.published)
        for item in page.posts()
    ]
