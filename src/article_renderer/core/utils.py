"""Common utilities for article-renderer."""

import json
from pathlib import Path

from ..exceptions import FileProcessingError


def format_duration(seconds: float) -> str:
    """Format duration in seconds to human-readable format.

    Args:
        seconds: Duration in seconds.

    Returns:
        Formatted duration string (e.g., "2m 34s", "45.2s").
    """
    if seconds < 60:
        return f"{seconds:.1f}s"

    minutes = int(seconds // 60)
    remaining_seconds = seconds % 60
    return f"{minutes}m {remaining_seconds:.0f}s"


def read_file_content(file_path: Path) -> str:
    """Read content from a file.

    Args:
        file_path: Path to the file to read.

    Returns:
        File content as string.

    Raises:
        FileProcessingError: If file cannot be read.
    """
    try:
        with open(file_path, encoding="utf-8") as f:
            return f.read()
    except Exception as e:
        raise FileProcessingError(f"Failed to read file: {e}", str(file_path)) from e


def write_file_content(file_path: Path, content: str) -> None:
    """Write content to a file.

    Args:
        file_path: Path to the file to write.
        content: Content to write.

    Raises:
        FileProcessingError: If file cannot be written.
    """
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, "w", encoding="utf-8") as f:
            f.write(content)
    except Exception as e:
        raise FileProcessingError(f"Failed to write file: {e}", str(file_path)) from e


def read_articles(file_path: Path) -> list[dict]:
    """Read a JSON list of article objects.

    Raises:
        FileProcessingError: If the file is not a JSON list.
    """
    try:
        articles = json.loads(read_file_content(file_path))
    except json.JSONDecodeError as e:
        raise FileProcessingError(f"Invalid JSON: {e}", str(file_path)) from e

    if not isinstance(articles, list):
        raise FileProcessingError("Expected a JSON list of articles", str(file_path))
    return articles


def write_articles(file_path: Path, articles: list[dict]) -> None:
    """Write articles as a JSON list."""
    write_file_content(file_path, json.dumps(articles, ensure_ascii=False, indent=2))
