"""Abstract base class for book parsers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bookmark_md.config import Config
from bookmark_md.ir.schema import BlockEvent, DocumentMetadata, RichText


class BaseParser(ABC):
    """Base class that all book parser implementations must extend."""

    def __init__(self, config: Config | None = None):
        self.config = config or Config.default()

    @abstractmethod
    def classify(self, text: str) -> list[BlockEvent]:
        """Split document text into block events."""

    @abstractmethod
    def assemble(
        self, events: list[BlockEvent], metadata: DocumentMetadata | None = None
    ) -> RichText:
        """Turn block events into styled rich text."""

    def parse(self, text: str, metadata: DocumentMetadata | None = None) -> RichText:
        """Parse document text and return its IR representation.

        Args:
            text: The decoded document.
            metadata: Source details to attach; title/author/year are filled in.

        Returns:
            A RichText representing the document.
        """
        return self.assemble(self.classify(text), metadata)

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the parser engine name (e.g. 'bookmark')."""

    @property
    @abstractmethod
    def version(self) -> str:
        """Return the parser version string."""
