"""Book parser implementations."""

from bookmark_md.parsers.assembler import assemble, convert
from bookmark_md.parsers.base import BaseParser
from bookmark_md.parsers.classifier import classify
from bookmark_md.parsers.factory import create_parser
from bookmark_md.parsers.stylist import derive_style, stylize

__all__ = [
    "BaseParser",
    "assemble",
    "classify",
    "convert",
    "create_parser",
    "derive_style",
    "stylize",
]
