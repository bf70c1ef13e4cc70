"""Custom exceptions for article rendering."""


class ArticleRendererError(Exception):
    """Base exception for article-renderer application."""
    pass


class ConfigurationError(ArticleRendererError):
    """Raised when configuration is invalid."""
    pass


class RenderError(ArticleRendererError):
    """Raised when a pipeline stage fails to render content."""

    def __init__(self, message: str, stage: str | None = None) -> None:
        self.stage = stage

        if stage:
            message = f"Rendering failed in stage '{stage}': {message}"

        super().__init__(message)


class HighlightError(RenderError):
    """Raised when syntax highlighting of a code block fails."""

    def __init__(self, message: str, language: str | None = None) -> None:
        self.language = language

        if language:
            message = f"{message} (language: {language})"

        super().__init__(message, stage="highlight")


class FileProcessingError(ArticleRendererError):
    """Raised when file processing fails."""

    def __init__(self, message: str, file_path: str | None = None) -> None:
        self.file_path = file_path

        if file_path:
            message = f"Failed to process file '{file_path}': {message}"

        super().__init__(message)
