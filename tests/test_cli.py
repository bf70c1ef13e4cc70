"""Tests for the command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from article_renderer.cli.main import app
from article_renderer.exceptions import ConfigurationError

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(temp_dir, monkeypatch):
    """Run every command where no configuration file can be found."""
    monkeypatch.chdir(temp_dir)
    monkeypatch.setenv("HOME", str(temp_dir))


class TestDetectCommand:
    """Test the detect command."""

    def test_detect_markdown(self, temp_dir, sample_markdown):
        path = temp_dir / "article.md"
        path.write_text(sample_markdown, encoding="utf-8")

        result = runner.invoke(app, ["detect", str(path)])

        assert result.exit_code == 0
        assert "markdown" in result.output

    def test_detect_missing_file(self, temp_dir):
        result = runner.invoke(app, ["detect", str(temp_dir / "missing.md")])

        assert result.exit_code == 1
        assert "Error" in result.output


class TestRenderCommand:
    """Test the render command."""

    def test_render_to_stdout(self, temp_dir, sample_markdown):
        path = temp_dir / "article.md"
        path.write_text(sample_markdown, encoding="utf-8")

        result = runner.invoke(app, ["render", str(path)])

        assert result.exit_code == 0
        assert '<h1 class="text-3xl' in result.output

    def test_render_to_file(self, temp_dir, sample_text):
        path = temp_dir / "article.txt"
        output = temp_dir / "article.html"
        path.write_text(sample_text, encoding="utf-8")

        result = runner.invoke(app, ["render", str(path), "--output", str(output)])

        assert result.exit_code == 0
        assert output.read_text(encoding="utf-8").startswith('<p class="mb-4 text-base leading-7">')

    def test_render_with_breaks(self, temp_dir):
        path = temp_dir / "article.md"
        path.write_text("# Notes\n\n- first\nsecond", encoding="utf-8")

        result = runner.invoke(app, ["render", str(path), "--breaks"])

        assert result.exit_code == 0
        assert "<br>" in result.output

    def test_render_missing_file(self, temp_dir):
        result = runner.invoke(app, ["render", str(temp_dir / "missing.md")])
        assert result.exit_code == 1

    def test_no_breaks_overrides_config_file(self, temp_dir):
        (temp_dir / "config.yaml").write_text("render:\n  breaks: true\n", encoding="utf-8")
        path = temp_dir / "article.md"
        path.write_text("# Notes\n\n- first\nsecond", encoding="utf-8")

        from_config = runner.invoke(app, ["render", str(path)])
        overridden = runner.invoke(app, ["render", str(path), "--no-breaks"])

        assert from_config.exit_code == 0
        assert "<br>" in from_config.output
        assert overridden.exit_code == 0
        assert "<br>" not in overridden.output

    def test_invalid_config_file(self, temp_dir, sample_text):
        """Test a bad config file is reported without a traceback."""
        (temp_dir / "config.yaml").write_text("logging:\n  level: LOUD\n", encoding="utf-8")
        path = temp_dir / "article.txt"
        path.write_text(sample_text, encoding="utf-8")

        result = runner.invoke(app, ["render", str(path)])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
        assert not isinstance(result.exception, ConfigurationError)


class TestConvertCommand:
    """Test the convert command."""

    def test_convert(self, temp_dir, sample_markdown, sample_html):
        path = temp_dir / "articles.json"
        path.write_text(
            json.dumps([{"title": "a", "content": sample_markdown}, {"title": "b", "content": sample_html}]),
            encoding="utf-8",
        )

        result = runner.invoke(app, ["convert", str(path), "--no-progress"])

        assert result.exit_code == 0
        assert "Conversion Summary" in result.output
        converted = json.loads(path.read_text(encoding="utf-8"))
        assert converted[0]["content"].startswith("<h1")
        assert converted[1]["content"] == sample_html

    def test_convert_with_errors_exits_nonzero(self, temp_dir):
        path = temp_dir / "articles.json"
        path.write_text(json.dumps([{"title": "bad", "content": 1}]), encoding="utf-8")

        result = runner.invoke(app, ["convert", str(path), "--no-progress"])

        assert result.exit_code == 1
        assert "bad" in result.output

    def test_convert_invalid_limit(self, temp_dir):
        path = temp_dir / "articles.json"
        path.write_text("[]", encoding="utf-8")

        result = runner.invoke(app, ["convert", str(path), "--limit", "0", "--no-progress"])

        assert result.exit_code == 1
        assert "Invalid option" in result.output


class TestConfigShowCommand:
    """Test the config-show command."""

    def test_config_show(self):
        result = runner.invoke(app, ["config-show"])

        assert result.exit_code == 0
        assert "Batch Limit" in result.output

    def test_config_show_invalid_file(self, temp_dir):
        config_path = temp_dir / "custom.yaml"
        config_path.write_text("render: [broken\n", encoding="utf-8")

        result = runner.invoke(app, ["config-show", "--config", str(config_path)])

        assert result.exit_code == 1
        assert "Invalid YAML" in result.output

    def test_config_show_from_file(self, temp_dir):
        config_path = temp_dir / "custom.yaml"
        config_path.write_text("batch:\n  limit: 7\n", encoding="utf-8")

        result = runner.invoke(app, ["config-show", "--config", str(config_path)])

        assert result.exit_code == 0
        assert "7" in result.output
