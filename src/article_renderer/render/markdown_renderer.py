"""Markdown to HTML rendering with custom code block handling.

This module wraps Python-Markdown with an extension that replaces the stock
fenced-code and code-span handling:

- Fenced blocks are highlighted with Pygments and wrapped in a
  ``<div class="code-block">`` container.
- Code spans are always escaped and tagged ``class="inline-code"``.

A new ``markdown.Markdown`` instance is built for every call from an
immutable ``RenderOptions``, so concurrent callers share no parser state.
"""

import html
import logging

import markdown
from markdown.extensions import Extension
from markdown.inlinepatterns import BACKTICK_RE, BacktickInlineProcessor
from markdown.preprocessors import Preprocessor

from ..core.config import RenderOptions
from ..core.fences import FENCE_RE, strip_fence_prefix
from ..exceptions import HighlightError, RenderError
from .highlight import escape_code, highlight_code

logger = logging.getLogger(__name__)

CODE_BLOCK_CLASS = "code-block"
INLINE_CODE_CLASS = "inline-code"


def render_code_block(code: str, language: str | None, options: RenderOptions) -> str:
    """Render a fenced code block.

    Highlighting problems never propagate; the block falls back to escaped
    text without highlighting classes.

    Args:
        code: Body of the fenced block.
        language: Language tag of the fence, if any.
        options: Renderer options.

    Returns:
        Code block markup wrapped in a ``code-block`` div.
    """
    language = language or None

    if options.highlight:
        try:
            result = highlight_code(code, language, auto_detect=options.auto_detect_language)
        except HighlightError as e:
            logger.debug("Falling back to plain code block: %s", e)
        else:
            if result.language:
                lang = html.escape(result.language, quote=True)
                code_open = f'<code class="hljs language-{lang}" data-language="{lang}">'
            else:
                code_open = '<code class="hljs">'
            return _wrap_code_block(f"<pre>{code_open}{result.html}</code></pre>")

    return _wrap_code_block(f"<pre><code>{escape_code(code)}</code></pre>")


def render_inline_code(text: str) -> str:
    """Render a code span as escaped ``inline-code`` markup."""
    return f'<code class="{INLINE_CODE_CLASS}">{escape_code(text)}</code>'


def _wrap_code_block(pre_html: str) -> str:
    return f'<div class="{CODE_BLOCK_CLASS}">{pre_html}</div>'


class FencedCodePreprocessor(Preprocessor):
    """Replaces fenced code blocks with stashed, pre-rendered HTML.

    Fences in blockquotes keep their ``>`` markers around the placeholder so
    the block stays inside the quote. Fences in list items indented four or
    more spaces are left to the markdown parser.
    """

    def __init__(self, md: markdown.Markdown, options: RenderOptions):
        super().__init__(md)
        self.options = options

    def run(self, lines: list[str]) -> list[str]:
        text = FENCE_RE.sub(self._replace, "\n".join(lines))
        return text.split("\n")

    def _replace(self, m) -> str:
        prefix = m.group("prefix")
        code = m.group("code")
        if code.endswith("\n"):
            code = code[:-1]

        block_html = render_code_block(strip_fence_prefix(code, prefix), m.group("lang"), self.options)
        placeholder = self.md.htmlStash.store(block_html)
        blank = prefix.rstrip()
        return f"{blank}\n{prefix}{placeholder}\n{blank}"


class InlineCodeProcessor(BacktickInlineProcessor):
    """Renders code spans through ``render_inline_code``.

    Span matching is left to the stock processor; only the element it builds
    is replaced.
    """

    def __init__(self, pattern: str, md: markdown.Markdown):
        super().__init__(pattern)
        self.md = md

    def handleMatch(self, m, data):
        el, start, end = super().handleMatch(m, data)
        if el is None or isinstance(el, str):
            # No closing backticks, or a run of escaped backslashes
            return el, start, end

        # The stock element text is already escaped for &, < and >
        code = html.unescape(el.text or "")
        placeholder = self.md.htmlStash.store(render_inline_code(code))
        return placeholder, start, end


class ArticleCodeExtension(Extension):
    """Python-Markdown extension registering the code processors."""

    def __init__(self, **kwargs):
        self.config = {
            "options": [RenderOptions(), "Renderer options"],
        }
        super().__init__(**kwargs)

    def extendMarkdown(self, md):
        options = self.getConfig("options")
        md.registerExtension(self)
        # Runs before raw HTML blocks are collected so code bodies stay literal
        md.preprocessors.register(FencedCodePreprocessor(md, options), "fenced_code_block", 25)
        md.inlinePatterns.register(InlineCodeProcessor(BACKTICK_RE, md), "backtick", 190)


def build_markdown(options: RenderOptions | None = None) -> markdown.Markdown:
    """Create a Markdown instance configured by options."""
    options = options or RenderOptions()
    extensions = [*options.markdown_extensions(), ArticleCodeExtension(options=options)]
    return markdown.Markdown(extensions=extensions, output_format="html")


def render_markdown(content: str, options: RenderOptions | None = None) -> str:
    """Convert markdown content to HTML.

    Args:
        content: Markdown text. Pipe tables should already be converted.
        options: Renderer options. Defaults to ``RenderOptions()``.

    Returns:
        HTML string.

    Raises:
        RenderError: If the markdown parser fails.
    """
    if not content:
        return ""

    try:
        return build_markdown(options).convert(content)
    except Exception as e:
        raise RenderError(str(e), stage="markdown") from e
