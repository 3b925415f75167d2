"""Zip writer for skill folders."""

from __future__ import annotations

import logging
import zipfile
from collections.abc import Iterator
from pathlib import Path

from skillpack.constants.packaging import ARCHIVE_COMPRESSION, ARCHIVE_SEPARATOR, DEFAULT_COMPRESSION_LEVEL
from skillpack.exceptions import ArchiveError
from skillpack.types import EntryCallback

logger = logging.getLogger(__name__)


def write_skill_archive(
    source_dir: Path,
    destination: Path,
    *,
    archive_root: str,
    compression_level: int = DEFAULT_COMPRESSION_LEVEL,
    on_entry: EntryCallback | None = None,
) -> int:
    """Zip every file and subdirectory of ``source_dir`` under ``archive_root/``.

    Entries are written in a sorted depth-first walk, and ``on_entry`` is called
    with each entry name once it has been written. An existing file at
    ``destination`` is overwritten; a partially written file is left in place
    on failure. Returns the number of entries written.
    """
    destination = destination.resolve()
    count = 0
    try:
        with zipfile.ZipFile(
            destination,
            "w",
            compression=ARCHIVE_COMPRESSION,
            compresslevel=compression_level,
        ) as archive:
            for path in iter_skill_tree(source_dir, exclude=destination):
                relative = path.relative_to(source_dir).as_posix()
                entry_name = f"{archive_root}{ARCHIVE_SEPARATOR}{relative}"
                archive.write(path, arcname=entry_name)
                if path.is_dir():
                    entry_name += ARCHIVE_SEPARATOR
                count += 1
                logger.debug("Archived %s", entry_name)
                if on_entry is not None:
                    on_entry(entry_name)
    except (OSError, ValueError, zipfile.LargeZipFile) as exc:
        raise ArchiveError(f"Error creating zip file: {exc}") from exc

    return count


def iter_skill_tree(source_dir: Path, *, exclude: Path | None = None) -> Iterator[Path]:
    """Yield every path below ``source_dir`` in sorted depth-first order.

    Symlinked directories are yielded but not descended into.
    """
    for path in sorted(source_dir.iterdir(), key=lambda item: item.name):
        if exclude is not None and path.resolve() == exclude:
            continue
        yield path
        if path.is_dir() and not path.is_symlink():
            yield from iter_skill_tree(path, exclude=exclude)
