"""Article content normalization: detect a body's format and render it as styled HTML."""

from .core.classifier import ContentType, detect_content_type, is_markdown_content
from .core.config import RenderOptions
from .core.format_converter import (
    ContentProcessor,
    TrustedHtml,
    convert_markdown_to_html,
    process_article_content,
    render_text_paragraphs,
)
from .core.table_normalizer import normalize_tables
from .exceptions import ArticleRendererError, HighlightError, RenderError
from .postprocess import apply_styling, repair_fragments
from .render import render_markdown

__all__ = [
    "ArticleRendererError",
    "ContentProcessor",
    "ContentType",
    "HighlightError",
    "RenderError",
    "RenderOptions",
    "TrustedHtml",
    "apply_styling",
    "convert_markdown_to_html",
    "detect_content_type",
    "is_markdown_content",
    "normalize_tables",
    "process_article_content",
    "render_markdown",
    "render_text_paragraphs",
    "repair_fragments",
]
