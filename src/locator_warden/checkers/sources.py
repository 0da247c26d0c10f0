"""Reading and discovering the source files the checkers scan."""

import fnmatch
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from ..errors import FileReadError

logger = logging.getLogger(__name__)


def read_source(path: Path) -> str:
    """
    Read a required source file.

    Raises:
        FileReadError: if the file is missing or unreadable
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(Path(path), getattr(e, "strerror", None) or str(e)) from e


def iter_source_files(
    directories: Iterable[Path],
    extensions: Iterable[str],
    exclude: Iterable[str] = (),
) -> Iterator[Path]:
    """Recursively yield files with the given extensions, skipping excluded names."""
    extensions = tuple(extensions)
    exclude = tuple(exclude)

    for directory in directories:
        directory = Path(directory)
        if not directory.is_dir():
            logger.debug("Skipping missing directory %s", directory)
            continue
        for path in sorted(directory.rglob("*")):
            if not path.is_file() or not path.name.endswith(extensions):
                continue
            if any(fnmatch.fnmatch(path.name, pattern) for pattern in exclude):
                continue
            yield path
