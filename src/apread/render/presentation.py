"""Console layout for rendered posts."""

import textwrap
from typing import Callable, List, Optional, Sequence

from apread.render.content import RenderedPost
from apread.resolve.handle import Handle

LABEL_WIDTH = 15
WRAP_WIDTH = 80
INDENT = 5

WrapFunc = Callable[[str, int], Sequence[str]]


def wrap_text(text: str, width: int) -> List[str]:
    """Wrap text to ``width`` columns, one source line at a time.

    Line breaks already present in ``text`` are kept and blank lines stay blank.
    """
    lines: List[str] = []
    for source_line in text.splitlines():
        if not source_line.strip():
            lines.append("")
            continue
        lines.extend(textwrap.wrap(source_line, width, break_on_hyphens=False))
    return lines


def render(
    handle: Handle,
    posts: Sequence[RenderedPost],
    wrap: Optional[WrapFunc] = None,
    label_width: int = LABEL_WIDTH,
    wrap_width: int = WRAP_WIDTH,
    indent: int = INDENT,
) -> List[str]:
    """Lay out posts as console lines.

    Each post is a right-aligned handle id, a blank line, the post body wrapped
    and indented, and a blank separator.

    Args:
        handle: Handle whose id labels every post
        posts: Rendered posts in display order
        wrap: Wrapping capability, ``wrap_text`` by default
        label_width: Field width the id is right-aligned in
        wrap_width: Column width the body is wrapped to
        indent: Number of spaces before each body line

    Returns:
        Output lines without trailing newlines
    """
    wrap = wrap or wrap_text
    prefix = " " * indent
    output: List[str] = []
    for post in posts:
        output.append(f"{handle.id:>{label_width}}")
        output.append("")
        for line in wrap(post.text, wrap_width):
            output.append(f"{prefix}{line}" if line else "")
        output.append("")
    return output
