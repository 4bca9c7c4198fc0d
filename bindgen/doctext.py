"""Convert the HTML fragments used in service documentation to Markdown.

Only the handful of tags that appear in API models are translated; any
other tag is dropped and its text kept.
"""

from __future__ import annotations

import html
import re
from typing import Callable

DocFormatter = Callable[[str], str]

_INLINE_TAGS: list[tuple[str, str]] = [
    (r"</?(?:code|codeph)>", "`"),
    (r"</?(?:b|strong)>", "**"),
    (r"</?(?:i|em)>", "*"),
]


def _convert_links(text: str) -> str:
    """Rewrite <a href="...">label</a> as [label](href)."""
    return re.sub(
        r'<a\s[^>]*href="([^"]*)"[^>]*>(.*?)</a>',
        lambda m: f"[{m.group(2).strip()}]({m.group(1)})",
        text,
        flags=re.DOTALL,
    )


def html_to_markdown(text: str) -> str:
    """Default documentation formatter."""
    if not text:
        return ""

    text = re.sub(r"\s+", " ", text)
    text = _convert_links(text)
    for pattern, replacement in _INLINE_TAGS:
        text = re.sub(pattern, replacement, text)

    text = re.sub(r"<li>\s*(?:<p>)?", "\n- ", text)
    text = re.sub(r"(?:</p>\s*)?</li>", "", text)
    text = re.sub(r"</?(?:p|ul|ol|note|important)>", "\n\n", text)
    text = re.sub(r"<br\s*/?>", "\n", text)
    text = re.sub(r"<[^>]+>", "", text)
    text = html.unescape(text)

    lines = [line.strip() for line in text.split("\n")]
    text = "\n".join(lines)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()
