"""Rich-text renderers."""

from bookmark_md.generators.word_generator import WordGenerator

__all__ = ["WordGenerator"]
