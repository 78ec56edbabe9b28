"""Exception hierarchy for bookmark-md."""


class BookmarkError(Exception):
    """Base exception for all bookmark-md errors."""


class LoadError(BookmarkError):
    """Raised when a book file cannot be read or decoded."""


class GenerationError(BookmarkError):
    """Raised when Word document generation fails."""


class ConfigError(BookmarkError):
    """Raised when configuration is invalid or missing."""
