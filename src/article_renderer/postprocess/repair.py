"""Heuristic repair of code blocks split apart during rendering.

Both passes are best-effort and independent of the markdown grammar: they
operate on the ``<div class="code-block">`` containers in finished HTML.
"""

import logging
import re

logger = logging.getLogger(__name__)


def _code_block(name: str) -> str:
    """Pattern for one code-block container with named groups."""
    return (
        rf'(?P<{name}_open><div class="code-block">(?P<{name}_pre><pre>)?<code[^>]*>)'
        rf"(?P<{name}_body>(?:(?!</code>).)*)"
        rf"(?P<{name}_close></code>(?({name}_pre)</pre>)</div>)"
    )


ADJACENT_BLOCKS_RE = re.compile(
    _code_block("first") + r"\s*" + _code_block("second"),
    re.DOTALL,
)

FRAGMENTED_BLOCK_RE = re.compile(
    _code_block("first")
    + r"\s*<p(?:\s[^>]*)?>(?P<text>(?:(?!</p>).)*)</p>\s*"
    + _code_block("second"),
    re.DOTALL,
)


def merge_fragmented_code_blocks(html: str) -> str:
    """Rejoin code blocks separated by a stray plain-text paragraph.

    The paragraph text is spliced back into the code as its own line. A
    paragraph holding any markup is left alone along with both blocks.

    Args:
        html: Rendered HTML.

    Returns:
        HTML with fragments merged.
    """
    pos = 0
    while True:
        m = FRAGMENTED_BLOCK_RE.search(html, pos)
        if m is None:
            return html

        text = m.group("text")
        if "<" in text or ">" in text:
            # The second block may still start another fragment
            pos = m.end("text")
            continue

        merged = (
            f'{m.group("first_open")}{m.group("first_body")}\n{text.strip()}\n'
            f'{m.group("second_body")}{m.group("first_close")}'
        )
        html = html[:m.start()] + merged + html[m.end():]
        pos = m.start()


def merge_adjacent_code_blocks(html: str) -> str:
    """Merge neighbouring code blocks until no two blocks are adjacent.

    Args:
        html: Rendered HTML.

    Returns:
        HTML where each run of adjacent code blocks is a single block.
    """

    def _merge(m: re.Match) -> str:
        return (
            f'{m.group("first_open")}{m.group("first_body")}\n'
            f'{m.group("second_body")}{m.group("first_close")}'
        )

    passes = 0
    while True:
        html, merged = ADJACENT_BLOCKS_RE.subn(_merge, html)
        if not merged:
            break
        passes += 1

    if passes:
        logger.debug("Merged adjacent code blocks in %d passes", passes)
    return html


def repair_fragments(html: str) -> str:
    """Apply every repair pass to rendered HTML."""
    if not html or "code-block" not in html:
        return html

    html = merge_fragmented_code_blocks(html)
    return merge_adjacent_code_blocks(html)
