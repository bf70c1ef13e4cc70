"""Article processors module."""

from .batch import ArticleFailure, BatchConverter, BatchResult

__all__ = [
    "ArticleFailure",
    "BatchConverter",
    "BatchResult",
]
