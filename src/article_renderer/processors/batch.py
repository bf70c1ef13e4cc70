"""Batch conversion of stored articles.

Loads a list of article records, converts the bodies detected as markdown to
HTML in place and reports how many were converted or failed. A failure on one
article never stops the batch.
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.progress import Progress

from ..core.classifier import ContentType, detect_content_type
from ..core.config import Config
from ..core.format_converter import ContentProcessor
from ..core.utils import format_duration, read_articles, write_articles

logger = logging.getLogger(__name__)


@dataclass
class ArticleFailure:
    """An article that could not be converted."""

    index: int
    title: str
    reason: str


@dataclass
class BatchResult:
    """Outcome of a batch conversion run."""

    total: int = 0
    converted: int = 0
    skipped: int = 0
    failures: list[ArticleFailure] = field(default_factory=list)
    duration: float = 0.0

    @property
    def errors(self) -> int:
        return len(self.failures)

    def summary(self) -> str:
        return (
            f"Converted {self.converted} of {self.total} articles "
            f"({self.skipped} skipped, {self.errors} errors) in {format_duration(self.duration)}"
        )


class BatchConverter:
    """Converts markdown article bodies in a list of article records."""

    def __init__(self, config: Config, console: Console | None = None, show_progress: bool = False) -> None:
        """Initialize batch converter.

        Args:
            config: Application configuration.
            console: Console for progress output.
            show_progress: Whether to display a progress bar.
        """
        self.config = config
        self.console = console or Console()
        self.show_progress = show_progress
        self.processor = ContentProcessor(config.render)

    def convert_articles(self, articles: list[dict]) -> BatchResult:
        """Convert up to ``batch.limit`` articles in place.

        Args:
            articles: Article records. Converted bodies replace the content field.

        Returns:
            Conversion counts.
        """
        batch = self.config.batch
        selected = articles[:batch.limit]
        result = BatchResult(total=len(selected))
        start_time = time.time()

        if self.show_progress:
            with Progress(console=self.console) as progress:
                task = progress.add_task("[green]Converting articles...", total=len(selected))
                for index, article in enumerate(selected):
                    self._convert_one(index, article, result)
                    progress.advance(task)
        else:
            for index, article in enumerate(selected):
                self._convert_one(index, article, result)

        result.duration = time.time() - start_time
        logger.info(result.summary())
        return result

    def convert_file(self, input_path: Path, output_path: Path | None = None) -> BatchResult:
        """Convert articles stored in a JSON file.

        Args:
            input_path: JSON file holding a list of articles.
            output_path: Where to write the converted list. Defaults to input_path.

        Returns:
            Conversion counts.

        Raises:
            FileProcessingError: If the file cannot be read or written.
        """
        articles = read_articles(input_path)
        result = self.convert_articles(articles)
        write_articles(output_path or input_path, articles)
        return result

    def _convert_one(self, index: int, article: dict, result: BatchResult) -> None:
        batch = self.config.batch

        if not isinstance(article, dict):
            result.failures.append(ArticleFailure(index, "", "article is not an object"))
            return

        title = str(article.get(batch.title_field) or f"#{index + 1}")
        content = article.get(batch.content_field)

        if content is None:
            result.skipped += 1
            return
        if not isinstance(content, str):
            result.failures.append(ArticleFailure(index, title, f"'{batch.content_field}' is not a string"))
            return

        if batch.only_markdown and detect_content_type(content) is not ContentType.MARKDOWN:
            result.skipped += 1
            return

        try:
            article[batch.content_field] = str(self.processor.process(content))
        except Exception as e:
            logger.error("Failed to convert article %s: %s", title, e)
            result.failures.append(ArticleFailure(index, title, str(e)))
            return

        result.converted += 1
        logger.debug("Converted article: %s", title)
