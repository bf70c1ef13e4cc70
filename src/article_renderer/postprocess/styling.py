"""Presentation class injection for rendered article HTML.

Styling is plain string substitution keyed on tag-open text. Only tags emitted
without attributes are matched (``<p>``, ``<h2>``), so a tag that already
carries attributes keeps them untouched. Links and images always carry
attributes; they are matched by prefix and skipped when a ``class`` is present.
"""

import re

HEADING_CLASS = "font-bold text-gray-900 dark:text-gray-100 mt-8 mb-4"
PARAGRAPH_CLASS = "mb-4 text-base leading-7"

TAG_CLASSES = {
    "h1": f"text-3xl {HEADING_CLASS}",
    "h2": f"text-2xl {HEADING_CLASS}",
    "h3": f"text-xl {HEADING_CLASS}",
    "h4": f"text-lg {HEADING_CLASS}",
    "h5": f"text-base {HEADING_CLASS}",
    "h6": f"text-sm {HEADING_CLASS}",
    "p": PARAGRAPH_CLASS,
    "ul": "mb-4 pl-6 list-disc",
    "ol": "mb-4 pl-6 list-decimal",
    "li": "mb-2",
    "blockquote": "border-l-4 border-gray-300 dark:border-gray-600 pl-4 italic text-gray-600 dark:text-gray-400 my-4",
    "hr": "border-gray-300 dark:border-gray-600 my-8",
    "strong": "font-semibold text-gray-900 dark:text-gray-100",
    "em": "italic",
    "a": "text-blue-600 dark:text-blue-400 hover:text-blue-800 dark:hover:text-blue-300 underline",
    "img": "max-w-full h-auto rounded-lg my-4 mx-auto",
}

LINK_ATTRIBUTES = 'target="_blank" rel="noopener noreferrer"'

STYLE_RE = re.compile(
    r"<(?P<bare>h[1-6]|p|ul|ol|li|blockquote|strong|em)>"
    r"|<(?P<hr>hr)\s*/?>"
    r"|<(?P<a>a) href(?![^>]*\bclass=)"
    r"|<(?P<img>img)(?=\s)(?![^>]*\bclass=)"
)


def paragraph(text: str) -> str:
    """Wrap text in a styled paragraph."""
    return f'<p class="{PARAGRAPH_CLASS}">{text}</p>'


def apply_styling(html: str, classes: dict[str, str] | None = None) -> str:
    """Inject presentation classes into bare tags.

    Args:
        html: Rendered HTML.
        classes: Per-tag overrides merged over ``TAG_CLASSES``.

    Returns:
        HTML with classes added in a single pass.
    """
    if not html:
        return html

    classes = {**TAG_CLASSES, **(classes or {})}

    def _replace(m: re.Match) -> str:
        if m.group("bare"):
            tag = m.group("bare")
            return f'<{tag} class="{classes[tag]}">'
        if m.group("hr"):
            return f'<hr class="{classes["hr"]}">'
        if m.group("a"):
            return f'<a class="{classes["a"]}" {LINK_ATTRIBUTES} href'
        return f'<img class="{classes["img"]}"'

    return STYLE_RE.sub(_replace, html)
