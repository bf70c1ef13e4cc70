"""Syntax highlighting of code blocks with Pygments."""

import html
import logging
from dataclasses import dataclass

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name, guess_lexer
from pygments.util import ClassNotFound

from ..exceptions import HighlightError

logger = logging.getLogger(__name__)

_FORMATTER = HtmlFormatter(nowrap=True)


@dataclass
class HighlightedCode:
    """Result of highlighting a code block."""

    html: str
    language: str | None
    detected: bool = False


def escape_code(text: str) -> str:
    """Escape ``& < > " '`` in code text."""
    return html.escape(text, quote=True)


def is_known_language(language: str | None) -> bool:
    """Check whether Pygments has a lexer registered under this name."""
    if not language:
        return False
    try:
        get_lexer_by_name(language)
    except ClassNotFound:
        return False
    return True


def highlight_code(code: str, language: str | None = None, auto_detect: bool = True) -> HighlightedCode:
    """Highlight code, guessing the language when none is recognized.

    Args:
        code: Source text of the block.
        language: Language tag from the fence, if any.
        auto_detect: Guess a lexer when the tag is missing or unknown.

    Returns:
        Highlighted markup. ``language`` is set only when the fence tag was
        recognized.

    Raises:
        HighlightError: If no lexer can be found or Pygments fails.
    """
    try:
        if is_known_language(language):
            lexer = get_lexer_by_name(language)
            return HighlightedCode(html=_render(code, lexer), language=language)

        if not auto_detect:
            raise HighlightError("Language not recognized and detection disabled", language)

        lexer = guess_lexer(code)
        logger.debug("Guessed lexer %s for code block", lexer.name)
        return HighlightedCode(html=_render(code, lexer), language=None, detected=True)
    except HighlightError:
        raise
    except Exception as e:
        raise HighlightError(str(e), language) from e


def _render(code: str, lexer) -> str:
    # Pygments appends a newline to its output; the fence body has none
    return highlight(code, lexer, _FORMATTER).rstrip("\n")
