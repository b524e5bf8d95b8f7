"""Byte-for-byte copy of an existing database into an ephemeral file."""
from __future__ import annotations

import logging
import os
import shutil
from typing import Union

from ...base.errors import CopyError, classify_exception
from ...base.logging import get_logger, log_event

logger = get_logger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def copy_database(source: PathLike, destination: PathLike) -> None:
    """Copy ``source`` over ``destination`` verbatim.

    The destination is truncated first; no SQLite API is involved, so the
    copy is exactly the bytes on disk (including any uncheckpointed state
    already in the main file).

    Raises
    ------
    CopyError
        If the source cannot be read or the destination cannot be written.
    """
    src = os.fspath(source)
    dst = os.fspath(destination)
    try:
        shutil.copyfile(src, dst)
    except OSError as exc:
        log_event(
            logger,
            "copy.failed",
            source_path=src,
            target=dst,
            error_code=classify_exception(exc),
            level=logging.ERROR,
        )
        raise CopyError(f"Can't copy {src}", path=src, raw=exc) from exc


__all__ = ["copy_database"]
