"""Book file loading: suffix filtering, decoding and hashing."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path

from bookmark_md.config import LoaderConfig
from bookmark_md.exceptions import LoadError

logger = logging.getLogger(__name__)

LOAD_FAILED = "Failed to load or read the selected file."


def is_supported(path: Path, config: LoaderConfig | None = None) -> bool:
    """Return True if the file suffix is one the reader accepts."""
    config = config or LoaderConfig()
    allowed = {ext.lower() for ext in config.extensions}
    return Path(path).suffix.lower() in allowed


def load_document(path: Path, config: LoaderConfig | None = None) -> str:
    """Read and decode a book file.

    Args:
        path: The file to read.
        config: Loader settings. Uses defaults if None.

    Returns:
        The decoded document text.

    Raises:
        LoadError: If the file type is unsupported, or the file cannot be
            read or decoded. The message is meant for the reader.
    """
    config = config or LoaderConfig()
    path = Path(path)

    if not is_supported(path, config):
        raise LoadError(
            f"Unsupported file type '{path.suffix or path.name}'. "
            f"Expected one of: {', '.join(config.extensions)}"
        )

    logger.info("Loading %s", path)
    try:
        return path.read_text(encoding=config.encoding)
    except FileNotFoundError:
        raise LoadError(f"{LOAD_FAILED}\nError: file not found: {path}")
    except UnicodeDecodeError as exc:
        raise LoadError(
            f"{LOAD_FAILED}\nError: not valid {config.encoding} text ({exc.reason})"
        ) from exc
    except LookupError as exc:
        raise LoadError(f"{LOAD_FAILED}\nError: {exc}") from exc
    except OSError as exc:
        raise LoadError(f"{LOAD_FAILED}\nError: {exc.strerror or exc}") from exc


def file_hash(path: Path) -> str:
    """Compute SHA-256 hash of a file for IR metadata."""
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()
