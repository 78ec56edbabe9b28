"""Parser factory — selects a parser implementation based on config."""

from __future__ import annotations

from bookmark_md.config import Config
from bookmark_md.exceptions import ConfigError
from bookmark_md.parsers.base import BaseParser


def create_parser(config: Config | None = None) -> BaseParser:
    """Create a parser instance based on config.

    Args:
        config: Reader configuration. Uses default if None.

    Returns:
        A BaseParser implementation.

    Raises:
        ConfigError: If the configured engine is unknown.
    """
    config = config or Config.default()
    engine = config.parser.engine.lower()

    if engine == "bookmark":
        from bookmark_md.parsers.markdown_parser import MarkdownParser

        return MarkdownParser(config)
    else:
        raise ConfigError(
            f"Unknown parser engine: '{engine}'. Available: bookmark"
        )
