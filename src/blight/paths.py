from __future__ import annotations

import os
import tempfile
from pathlib import Path


def default_save_dir(app_name: str = "blight") -> Path:
    """Return the user-writable directory holding saved brightness state.

    Uses XDG_DATA_HOME when available, else ~/.local/share.
    """

    base = os.environ.get("XDG_DATA_HOME")
    if base:
        root = Path(base)
    else:
        root = Path.home() / ".local" / "share"
    return root / app_name


def default_lock_path(app_name: str = "blight") -> Path:
    # XDG_RUNTIME_DIR is per-user and cleared on logout.
    base = os.environ.get("XDG_RUNTIME_DIR") or tempfile.gettempdir()
    return Path(base) / f"{app_name}.lock"
