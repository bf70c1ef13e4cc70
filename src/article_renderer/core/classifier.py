"""Content type detection for article bodies of unknown provenance."""

import re
from enum import Enum


class ContentType(str, Enum):
    """Format tag assigned to a raw article body."""

    HTML = "html"
    MARKDOWN = "markdown"
    TEXT = "text"

    def __str__(self) -> str:
        return self.value


HTML_TAG_RE = re.compile(r"<[^>]+>")

# Tags per thousand characters above which content counts as HTML.
HTML_TAG_DENSITY = 8
HTML_MIN_TAGS = 3

MARKDOWN_PATTERNS = [
    re.compile(r"^#{1,6}\s+.+$", re.MULTILINE),           # heading
    re.compile(r"^\* .+$", re.MULTILINE),                 # bullet (*)
    re.compile(r"^- .+$", re.MULTILINE),                  # bullet (-)
    re.compile(r"^\d+\. .+$", re.MULTILINE),              # ordered list
    re.compile(r"\*\*.+\*\*"),                            # bold
    re.compile(r"\[.+\]\(.+\)"),                          # link
    re.compile(r"!\[.*\]\(.+\)"),                         # image
    re.compile(r"^```[^\n]*\n.*?^```", re.MULTILINE | re.DOTALL),  # fenced code
    re.compile(r"`.+`"),                                  # inline code
    re.compile(r"^>.+$", re.MULTILINE),                   # blockquote
    re.compile(r"^\|.+\|$", re.MULTILINE),                # table row
]
MARKDOWN_MIN_MATCHES = 2


def count_html_tags(content: str) -> int:
    """Count tag-like substrings in content."""
    return len(HTML_TAG_RE.findall(content))


def count_markdown_signals(content: str) -> int:
    """Count how many distinct markdown patterns occur anywhere in content.

    Every pattern is evaluated; matching one does not stop the others.
    """
    return sum(1 for pattern in MARKDOWN_PATTERNS if pattern.search(content))


def detect_content_type(content: str | None) -> ContentType:
    """Classify content as HTML, markdown or plain text.

    HTML wins only when tags are both numerous and dense, so markdown carrying
    a few inline tags such as ``<br>`` is not mistaken for HTML.

    Args:
        content: Raw article body. ``None`` and empty strings are text.

    Returns:
        The detected content type.
    """
    if not content:
        return ContentType.TEXT

    tag_count = count_html_tags(content)
    if tag_count > HTML_MIN_TAGS and (tag_count / len(content)) * 1000 > HTML_TAG_DENSITY:
        return ContentType.HTML

    if count_markdown_signals(content) >= MARKDOWN_MIN_MATCHES:
        return ContentType.MARKDOWN

    return ContentType.TEXT


def is_markdown_content(content: str | None) -> bool:
    """Check whether content is detected as markdown."""
    return detect_content_type(content) is ContentType.MARKDOWN
