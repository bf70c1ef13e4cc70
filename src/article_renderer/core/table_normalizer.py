"""Pipe-table detection and conversion to HTML tables.

Pipe-delimited ASCII tables embedded in markdown are rewritten as HTML before
the content reaches the markdown parser. Source tables from feeds are often
loosely formatted (blank lines between rows, ragged column counts), which the
parser's own table support does not tolerate.
"""

import logging
import re
from dataclasses import dataclass

from .fences import fenced_line_numbers

logger = logging.getLogger(__name__)

SEPARATOR_RE = re.compile(r"^\|[\s\-:+|]*-[\s\-:+|]*\|$")

MIN_PIPES = 3
MIN_TABLE_ROWS = 2


@dataclass
class TableBlock:
    """A run of pipe-delimited lines found by a single scan."""

    start_line: int
    lines: list[str]

    @property
    def end_line(self) -> int:
        return self.start_line + len(self.lines)

    @property
    def rows(self) -> list[str]:
        """Non-blank lines of the run, trimmed."""
        return [line.strip() for line in self.lines if line.strip()]


def is_table_row(line: str) -> bool:
    """Check if a line looks like a pipe-delimited table row."""
    stripped = line.strip()
    return (
        len(stripped) > 1
        and stripped.startswith("|")
        and stripped.endswith("|")
        and stripped.count("|") >= MIN_PIPES
    )


def is_separator_row(line: str) -> bool:
    """Check if a row is a header separator such as ``|---|:--:|``."""
    return bool(SEPARATOR_RE.match(line.strip()))


def parse_row(line: str) -> list[str]:
    """Split a table row into trimmed cells.

    Embedded pipes cannot be escaped; every ``|`` is a cell boundary.
    """
    stripped = line.strip()
    if stripped.startswith("|"):
        stripped = stripped[1:]
    if stripped.endswith("|"):
        stripped = stripped[:-1]
    return [cell.strip() for cell in stripped.split("|")]


class TableNormalizer:
    """Finds pipe tables in text and replaces them with HTML tables."""

    def __init__(self, wrapper_class: str = "table-wrapper"):
        """Initialize table normalizer.

        Args:
            wrapper_class: Class of the ``<div>`` wrapped around each table.
        """
        self.wrapper_class = wrapper_class

    def normalize(self, content: str) -> str:
        """Replace every convertible pipe table in content with HTML.

        Args:
            content: Markdown or plain text.

        Returns:
            Content with tables converted. Runs that cannot be converted are
            left exactly as they were.
        """
        if not content or "|" not in content:
            return content

        lines = content.split("\n")
        output: list[str] = []

        for block_or_line in self._scan(lines):
            if isinstance(block_or_line, str):
                output.append(block_or_line)
                continue

            table_html = self.render_block(block_or_line)
            if table_html is None:
                logger.debug(
                    "Leaving table candidate at line %d as text", block_or_line.start_line + 1
                )
                output.extend(block_or_line.lines)
            else:
                # Blank lines keep the HTML block separate for the markdown parser
                output.extend(["", table_html, ""])

        return "\n".join(output)

    def find_blocks(self, content: str) -> list[TableBlock]:
        """Find table candidates in content without converting them."""
        return [item for item in self._scan(content.split("\n")) if isinstance(item, TableBlock)]

    def _scan(self, lines: list[str]) -> list[str | TableBlock]:
        """Split lines into plain lines and table candidate runs.

        Lines inside fenced code blocks are never table candidates.
        """
        items: list[str | TableBlock] = []
        fenced = fenced_line_numbers("\n".join(lines))
        i = 0

        while i < len(lines):
            if i in fenced or not is_table_row(lines[i]):
                items.append(lines[i])
                i += 1
                continue

            end = i + 1
            while end < len(lines) and end not in fenced and (
                is_table_row(lines[end]) or not lines[end].strip()
            ):
                end += 1

            # Trailing blank lines belong to the surrounding text
            while end > i + 1 and not lines[end - 1].strip():
                end -= 1

            items.append(TableBlock(start_line=i, lines=lines[i:end]))
            i = end

        return items

    def render_block(self, block: TableBlock) -> str | None:
        """Render a table candidate as HTML.

        Args:
            block: Candidate run of lines.

        Returns:
            HTML table markup, or None if the run is not a usable table.
        """
        rows = block.rows
        if len(rows) < MIN_TABLE_ROWS:
            return None

        separator_index = next((i for i, row in enumerate(rows) if is_separator_row(row)), None)
        if separator_index is None:
            header_rows, body_rows = rows[:1], rows[1:]
        else:
            header_rows, body_rows = rows[:separator_index], rows[separator_index + 1:]

        header_cells = [parse_row(row) for row in header_rows]
        if not header_cells or not header_cells[0]:
            return None
        column_count = len(header_cells[0])

        body_cells = []
        for row in body_rows:
            if is_separator_row(row):
                continue
            cells = parse_row(row)
            if not any(cells):
                continue
            body_cells.append([cells[i] if i < len(cells) else "" for i in range(column_count)])

        if not body_cells:
            return None

        thead = "".join(
            "<tr>" + "".join(f"<th>{cell}</th>" for cell in cells) + "</tr>"
            for cells in header_cells
        )
        tbody = "".join(
            "<tr>" + "".join(f"<td>{cell}</td>" for cell in cells) + "</tr>"
            for cells in body_cells
        )
        return (
            f'<div class="{self.wrapper_class}"><table>'
            f"<thead>{thead}</thead><tbody>{tbody}</tbody>"
            "</table></div>"
        )


def normalize_tables(content: str) -> str:
    """Convert pipe tables in content to HTML tables."""
    return TableNormalizer().normalize(content)
