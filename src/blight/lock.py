from __future__ import annotations

import fcntl
import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from blight.paths import default_lock_path

logger = logging.getLogger(__name__)


class LockError(RuntimeError):
    pass


@contextmanager
def instance_lock(path: str | Path | None = None) -> Iterator[Path]:
    """Hold an exclusive lock so two blight processes never write at once."""

    lock_path = Path(default_lock_path() if path is None else path)
    fh = open(lock_path, "a+", encoding="utf-8")
    try:
        try:
            fcntl.flock(fh.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
        except OSError as e:
            raise LockError(f"Another instance of blight is already running ({lock_path})") from e
        fh.seek(0)
        fh.truncate()
        fh.write(f"pid={os.getpid()}\n")
        fh.flush()
        logger.debug("acquired %s", lock_path)
        try:
            yield lock_path
        finally:
            fcntl.flock(fh.fileno(), fcntl.LOCK_UN)
    finally:
        fh.close()
