from __future__ import annotations

import datetime as dt
import logging
from pathlib import Path

from til.core.errors import CannotBuildPath, CannotCreateDir, CannotFindDir, NoteError
from til.core.result import Err, Ok, Result

logger = logging.getLogger(__name__)

PATH_FROM_HOME = Path(".til") / "notes"
NOTE_TITLE = "default"
NOTE_EXTENSION = "md"


def find_root_dir(configured: Path | None = None) -> Result[Path, NoteError]:
    """Return the notes root: the configured directory, else ``~/.til/notes``."""
    try:
        if configured is not None:
            return Ok(configured.expanduser())
        return Ok(Path.home() / PATH_FROM_HOME)
    except RuntimeError:
        return Err(CannotFindDir("root"))


def format_date_dir(day: dt.date) -> str:
    """Render ``day`` as the ``MM-DD-YYYY`` directory name."""
    return f"{day.month:02d}-{day.day:02d}-{day.year:04d}"


def resolve_note_path(root: Path, today: dt.date | None = None) -> Result[Path, NoteError]:
    """
    Build ``root/MM-DD-YYYY/default.md`` for ``today`` (local date by default)
    and make sure its directory exists.
    """
    day = today or dt.date.today()
    note_path = root / format_date_dir(day) / f"{NOTE_TITLE}.{NOTE_EXTENSION}"
    directory = note_path.parent

    try:
        if not directory.is_dir():
            directory.mkdir(parents=True, exist_ok=True)
            logger.debug("Created note directory %s", directory)
    except ValueError as exc:
        # e.g. an embedded NUL byte in the configured root
        return Err(CannotBuildPath(str(exc)))
    except OSError:
        return Err(CannotCreateDir(directory))

    return Ok(note_path)
