"""Markdown rendering module."""

from .highlight import highlight_code
from .markdown_renderer import ArticleCodeExtension, render_code_block, render_inline_code, render_markdown

__all__ = [
    "ArticleCodeExtension",
    "highlight_code",
    "render_code_block",
    "render_inline_code",
    "render_markdown",
]
