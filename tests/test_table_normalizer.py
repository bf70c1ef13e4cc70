"""Tests for pipe table conversion."""

from article_renderer.core.table_normalizer import (
    TableBlock,
    TableNormalizer,
    is_separator_row,
    is_table_row,
    normalize_tables,
    parse_row,
)

SIMPLE_TABLE_HTML = (
    '<div class="table-wrapper"><table>'
    "<thead><tr><th>A</th><th>B</th></tr></thead>"
    "<tbody><tr><td>1</td><td>2</td></tr></tbody>"
    "</table></div>"
)


class TestRowHelpers:
    """Test row predicates and parsing."""

    def test_is_table_row(self):
        assert is_table_row("| A | B |")
        assert is_table_row("   |a|b|   ")
        assert not is_table_row("| A |")
        assert not is_table_row("A | B | C")
        assert not is_table_row("")

    def test_is_separator_row(self):
        assert is_separator_row("|---|---|")
        assert is_separator_row("| :--- | ---: |")
        assert is_separator_row("|-+-|")
        assert not is_separator_row("| A | B |")
        assert not is_separator_row("| : | : |")

    def test_parse_row(self):
        assert parse_row("| a | b |") == ["a", "b"]
        assert parse_row("|a||b|") == ["a", "", "b"]
        assert parse_row("  | x |  y  |  ") == ["x", "y"]


class TestTableNormalizer:
    """Test TableNormalizer class."""

    def test_simple_table(self):
        """Test header, separator and one body row."""
        result = normalize_tables("| A | B |\n|---|---|\n| 1 | 2 |")
        assert result == f"\n{SIMPLE_TABLE_HTML}\n"

    def test_no_pipes_returns_input(self):
        """Test content without pipes is returned as-is."""
        content = "No tables here.\n\nJust text."
        assert normalize_tables(content) == content

    def test_without_separator_first_row_is_header(self):
        """Test missing separator uses the first row as header."""
        result = normalize_tables("| A | B |\n| 1 | 2 |\n| 3 | 4 |")

        assert "<thead><tr><th>A</th><th>B</th></tr></thead>" in result
        assert "<tr><td>1</td><td>2</td></tr><tr><td>3</td><td>4</td></tr>" in result

    def test_blank_lines_inside_table_are_absorbed(self):
        """Test loosely spaced rows form one table."""
        result = normalize_tables("| A | B |\n\n|---|---|\n\n| 1 | 2 |\n\n| 3 | 4 |")

        assert result.count("<table>") == 1
        assert "<td>3</td><td>4</td>" in result

    def test_single_row_is_left_alone(self):
        """Test a lone pipe line is not converted."""
        content = "Before\n| A | B |\nAfter"
        assert normalize_tables(content) == content

    def test_short_rows_are_padded(self):
        """Test missing cells become empty cells."""
        result = normalize_tables("| A | B | C |\n|---|---|---|\n| 1 | 2 |")
        assert "<tr><td>1</td><td>2</td><td></td></tr>" in result

    def test_long_rows_are_truncated(self):
        """Test cells beyond the header width are dropped."""
        result = normalize_tables("| A | B |\n|---|---|\n| 1 | 2 | 3 | 4 |")
        assert "<tr><td>1</td><td>2</td></tr>" in result
        assert "<td>3</td>" not in result

    def test_header_only_is_left_alone(self):
        """Test a table with no body rows is not converted."""
        content = "| A | B |\n|---|---|"
        assert normalize_tables(content) == content

    def test_empty_body_rows_are_left_alone(self):
        """Test body rows with only empty cells do not count."""
        content = "| A | B |\n|---|---|\n|   |   |"
        assert normalize_tables(content) == content

    def test_surrounding_text_is_kept(self):
        """Test text around the table survives with blank-line padding."""
        result = normalize_tables("Intro\n| A | B |\n|---|---|\n| 1 | 2 |\nOutro")
        assert result == f"Intro\n\n{SIMPLE_TABLE_HTML}\n\nOutro"

    def test_trailing_blank_lines_are_not_absorbed(self):
        """Test blank lines after the last row stay in the text."""
        result = normalize_tables("| A | B |\n|---|---|\n| 1 | 2 |\n\nAfter")
        assert result == f"\n{SIMPLE_TABLE_HTML}\n\n\nAfter"

    def test_tables_inside_code_fences_are_ignored(self):
        """Test pipe rows inside fenced code are not converted."""
        content = "```\n| A | B |\n|---|---|\n| 1 | 2 |\n```"
        assert normalize_tables(content) == content

    def test_table_after_code_fence_is_converted(self):
        """Test fence tracking resumes after the closing fence."""
        result = normalize_tables("```\ncode\n```\n| A | B |\n|---|---|\n| 1 | 2 |")
        assert SIMPLE_TABLE_HTML in result
        assert result.startswith("```\ncode\n```\n")

    def test_unclosed_indented_fence_does_not_hide_tables(self):
        """Test an opening fence that never closes leaves later tables convertible."""
        result = normalize_tables("   ```\n| A | B |\n|---|---|\n| 1 | 2 |")

        assert SIMPLE_TABLE_HTML in result
        assert result.startswith("   ```\n")

    def test_tables_inside_indented_fence_are_ignored(self):
        content = "  ```\n| A | B |\n|---|---|\n| 1 | 2 |\n  ```"
        assert normalize_tables(content) == content

    def test_two_tables(self):
        """Test separate tables are converted independently."""
        result = normalize_tables(
            "| A | B |\n|---|---|\n| 1 | 2 |\nbetween\n| C | D |\n|---|---|\n| 3 | 4 |"
        )
        assert result.count('<div class="table-wrapper">') == 2
        assert "\nbetween\n" in result

    def test_custom_wrapper_class(self):
        """Test the wrapper class can be changed."""
        normalizer = TableNormalizer(wrapper_class="scroll")
        assert '<div class="scroll"><table>' in normalizer.normalize("| A | B |\n| 1 | 2 |")

    def test_find_blocks(self):
        """Test candidate runs are reported with positions."""
        blocks = TableNormalizer().find_blocks("text\n| A | B |\n\n| 1 | 2 |\n\nmore")

        assert len(blocks) == 1
        assert blocks[0].start_line == 1
        assert blocks[0].end_line == 4
        assert blocks[0].rows == ["| A | B |", "| 1 | 2 |"]

    def test_render_block_rejects_single_row(self):
        """Test blocks shorter than two rows render to None."""
        block = TableBlock(start_line=0, lines=["| A | B |", ""])
        assert TableNormalizer().render_block(block) is None
