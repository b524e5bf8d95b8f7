"""Ephemeral database files.

An :class:`EphemeralDatabaseFile` reserves a unique path with
``tempfile.mkstemp`` and removes it, together with any SQLite sidecar files
(``-journal``, ``-wal``, ``-shm``), when the object is garbage collected, when
``cleanup()`` is called, or at interpreter exit, whichever comes first. The
removal is registered with ``weakref.finalize`` the same way
``tempfile.TemporaryDirectory`` does it, so it never runs twice.
"""
from __future__ import annotations

import os
import tempfile
import weakref
from contextlib import suppress
from pathlib import Path
from typing import Optional

from ...base.logging import get_logger, log_event
from ...config.defaults import (
    EPHEMERAL_PREFIX,
    EPHEMERAL_SUFFIX,
    SQLITE_SIDECAR_SUFFIXES,
)

logger = get_logger(__name__)


def _remove_database_files(filename: str) -> None:
    for candidate in (filename, *(filename + s for s in SQLITE_SIDECAR_SUFFIXES)):
        with suppress(FileNotFoundError):
            os.remove(candidate)


class EphemeralDatabaseFile:
    """A uniquely named, initially empty file that deletes itself.

    Parameters
    ----------
    tmp_dir:
        Directory to create the file in. ``None`` lets ``tempfile`` decide.
    prefix, suffix:
        File name affixes.

    The object is ``os.PathLike``, so it can be handed to ``shutil``,
    ``sqlite3.connect`` or ``open`` directly.
    """

    def __init__(
        self,
        tmp_dir: Optional[str] = None,
        prefix: str = EPHEMERAL_PREFIX,
        suffix: str = EPHEMERAL_SUFFIX,
    ) -> None:
        fd, name = tempfile.mkstemp(suffix=suffix, prefix=prefix, dir=tmp_dir)
        os.close(fd)
        self.path = Path(name)
        self._finalizer = weakref.finalize(self, _remove_database_files, name)

    @property
    def filename(self) -> str:
        return str(self.path)

    @property
    def removed(self) -> bool:
        """True once the backing file has been cleaned up."""
        return not self._finalizer.alive

    def cleanup(self) -> None:
        """Remove the file now. Safe to call more than once."""
        if self._finalizer.alive:
            self._finalizer()
            log_event(logger, "ephemeral.removed", target=self.filename)

    def __fspath__(self) -> str:
        return self.filename

    def __enter__(self) -> "EphemeralDatabaseFile":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()

    def __repr__(self) -> str:
        state = "removed" if self.removed else "live"
        return f"<EphemeralDatabaseFile {self.filename!r} {state}>"


__all__ = ["EphemeralDatabaseFile"]
