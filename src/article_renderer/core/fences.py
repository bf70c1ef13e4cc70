"""Fenced code block detection shared by the table normalizer and renderer.

A fence opens with three or more backticks or tildes and closes with the same
marker on a later line carrying the same prefix. The prefix may hold up to
three spaces of indentation and any number of ``>`` blockquote markers, so
fences in blockquotes and shallow list items are found. Fences indented four
or more spaces are indented code, not fences. A fence that is never closed is
not a code block.
"""

import re

FENCE_RE = re.compile(
    r"^(?P<prefix>[ ]{0,3}(?:>[ ]?)*)(?P<fence>`{3,}|~{3,})[ \t]*(?P<lang>[\w#+.\-]*)[^\n]*\n"
    r"(?P<code>.*?)(?<=\n)(?P=prefix)(?P=fence)[ \t]*$",
    re.MULTILINE | re.DOTALL,
)


def strip_fence_prefix(code: str, prefix: str) -> str:
    """Remove the fence prefix from each line of a fenced body.

    Lines missing the indentation but keeping the ``>`` markers, and lazy
    blockquote lines without any marker, are kept as they are otherwise.
    """
    if not prefix:
        return code

    marker = prefix.rstrip()
    lines = []
    for line in code.split("\n"):
        if line.startswith(prefix):
            line = line[len(prefix):]
        elif marker and line.startswith(marker):
            line = line[len(marker):]
        lines.append(line)
    return "\n".join(lines)


def fenced_line_numbers(text: str) -> set[int]:
    """Get the zero-based numbers of every line inside a closed fence.

    Opening and closing fence lines are included.
    """
    numbers: set[int] = set()
    for m in FENCE_RE.finditer(text):
        first = text.count("\n", 0, m.start())
        last = first + m.group(0).count("\n")
        numbers.update(range(first, last + 1))
    return numbers
