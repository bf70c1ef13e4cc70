"""Article content conversion pipeline.

This module turns an article body of unknown format into styled HTML:

    raw -> classify -> (markdown: normalize tables -> parse) -> style -> repair

HTML input is returned unchanged and plain text is split into paragraphs.
The pipeline never raises; when markdown parsing fails the raw content is
returned inside a single paragraph.

Output is NOT sanitized. It is returned as ``TrustedHtml`` to make explicit
that callers insert it into a page as markup.
"""

import logging
import re

from ..exceptions import RenderError
from ..postprocess.repair import repair_fragments
from ..postprocess.styling import apply_styling, paragraph
from ..render.markdown_renderer import render_markdown
from .classifier import ContentType, detect_content_type
from .config import RenderOptions
from .table_normalizer import TableNormalizer

logger = logging.getLogger(__name__)

PARAGRAPH_BREAK_RE = re.compile(r"\n\s*\n")


class TrustedHtml(str):
    """HTML produced by the pipeline, to be inserted without escaping."""

    __slots__ = ()


class ContentProcessor:
    """Converts article bodies to styled HTML."""

    def __init__(self, options: RenderOptions | None = None):
        """Initialize the content processor.

        Args:
            options: Markdown renderer options. Defaults to ``RenderOptions()``.
        """
        self.options = options or RenderOptions()
        self.table_normalizer = TableNormalizer()

    def process(self, content: str | None) -> TrustedHtml:
        """Convert content to HTML according to its detected type.

        Args:
            content: Raw article body.

        Returns:
            Rendered HTML. Empty input yields an empty string.
        """
        if not content:
            return TrustedHtml("")

        content_type = detect_content_type(content)

        if content_type is ContentType.MARKDOWN:
            return self.markdown_to_html(content)
        if content_type is ContentType.HTML:
            return TrustedHtml(content)
        return self.text_to_html(content)

    def markdown_to_html(self, markdown_content: str) -> TrustedHtml:
        """Convert markdown content to styled HTML.

        Args:
            markdown_content: Markdown content string.

        Returns:
            Styled HTML, or the raw content in one paragraph if parsing fails.
        """
        if not markdown_content:
            return TrustedHtml("")

        try:
            normalized = self.table_normalizer.normalize(markdown_content)
            html_content = render_markdown(normalized, self.options)
        except RenderError:
            logger.warning("Markdown conversion failed, returning raw content", exc_info=True)
            return TrustedHtml(paragraph(markdown_content))
        except Exception:
            logger.exception("Unexpected error while converting markdown")
            return TrustedHtml(paragraph(markdown_content))

        html_content = apply_styling(html_content)
        return TrustedHtml(repair_fragments(html_content))

    def text_to_html(self, content: str) -> TrustedHtml:
        """Wrap each blank-line separated paragraph of text in a styled ``<p>``.

        Args:
            content: Plain text.

        Returns:
            Paragraphs joined by newlines.
        """
        paragraphs = (p.strip() for p in PARAGRAPH_BREAK_RE.split(content))
        return TrustedHtml("\n".join(paragraph(p) for p in paragraphs if p))


# Default processor instance; holds only immutable options
_processor = None


def get_processor() -> ContentProcessor:
    """Get the default content processor instance."""
    global _processor
    if _processor is None:
        _processor = ContentProcessor()
    return _processor


def _processor_for(options: RenderOptions | None) -> ContentProcessor:
    return get_processor() if options is None else ContentProcessor(options)


def process_article_content(content: str | None, options: RenderOptions | None = None) -> TrustedHtml:
    """Convert an article body of any supported format to HTML."""
    return _processor_for(options).process(content)


def convert_markdown_to_html(content: str, options: RenderOptions | None = None) -> TrustedHtml:
    """Convert markdown to styled HTML."""
    return _processor_for(options).markdown_to_html(content)


def render_text_paragraphs(content: str) -> TrustedHtml:
    """Convert plain text to styled paragraphs."""
    return get_processor().text_to_html(content)
