from __future__ import annotations

import contextlib
import logging
import os
import shutil
from collections.abc import Sequence
from pathlib import Path

from til.core.errors import (
    CannotOpenOrCreatePath,
    CannotParseMetaData,
    CannotReadFile,
    CannotWriteToFile,
    NoteError,
)
from til.core.frontmatter import Header, merge_tags, unique
from til.core.paths import NOTE_TITLE
from til.core.result import Err, Ok, Result

logger = logging.getLogger(__name__)


def format_entry(content: str) -> str:
    return f"- {content}\n"


def _file_size(path: Path) -> int:
    try:
        return path.stat().st_size
    except FileNotFoundError:
        return 0


def append_entry(path: Path, content: str, tags: Sequence[str] = ()) -> Result[None, NoteError]:
    """
    Append ``content`` as an entry line to the note at ``path``.

    An empty or missing file first receives a header carrying ``tags``. A
    file that already has content gets any new ``tags`` merged into its
    header; with no tags the header is left alone and the file is not read.

    Tags are compared by exact string equality while tags already in the
    header are read back trimmed, so callers should pass trimmed tags: a
    padded ``" a"`` never matches a stored ``a`` and is added again on every
    call. ``commands.notes.split_tags`` does this for the CLI.
    """
    try:
        size = _file_size(path)
    except OSError:
        return Err(CannotReadFile(path))

    prefix = ""
    if size == 0:
        prefix = Header(title=NOTE_TITLE, tags=unique(tags)).render()
        logger.debug("Initializing %s with tags %s", path, list(tags))
    elif tags:
        merged = _merge_header(path, tags)
        if merged.is_err():
            return merged

    return _append(path, prefix + format_entry(content))


def _append(path: Path, text: str) -> Result[None, NoteError]:
    try:
        handle = path.open("a", encoding="utf-8", newline="")
    except OSError:
        return Err(CannotOpenOrCreatePath(path))

    try:
        with handle:
            handle.write(text)
    except OSError:
        return Err(CannotWriteToFile(path))
    return Ok(None)


def _merge_header(path: Path, tags: Sequence[str]) -> Result[None, NoteError]:
    try:
        with path.open("r", encoding="utf-8", newline="") as fh:
            original = fh.read()
    except (OSError, UnicodeDecodeError):
        return Err(CannotReadFile(path))

    try:
        merged = merge_tags(original, tags)
    except CannotParseMetaData as exc:
        return Err(exc)

    if merged == original:
        logger.debug("Tags %s already present in %s", list(tags), path)
        return Ok(None)

    logger.debug("Rewriting header of %s", path)
    return _replace_contents(path, merged)


def _replace_contents(path: Path, text: str) -> Result[None, NoteError]:
    """Atomically swap the file contents for ``text``."""
    temp_path = path.with_name(f".{path.name}.tmp")
    try:
        with temp_path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(text)
            fh.flush()
            os.fsync(fh.fileno())
        shutil.copymode(path, temp_path)
        os.replace(temp_path, path)
    except OSError:
        with contextlib.suppress(OSError):
            temp_path.unlink(missing_ok=True)
        return Err(CannotWriteToFile(path))
    return Ok(None)
