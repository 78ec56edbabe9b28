"""Book-flavoured Markdown to styled rich text."""

__version__ = "0.1.0"
