from __future__ import annotations

import tempfile
from pathlib import Path

from blight.paths import default_lock_path, default_save_dir


def test_default_save_dir_is_user_writable(monkeypatch) -> None:
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    p = default_save_dir()
    # Must not default to system locations.
    assert str(p).startswith(str(Path.home()))
    assert p == Path.home() / ".local" / "share" / "blight"


def test_default_save_dir_honours_xdg(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    assert default_save_dir() == tmp_path / "blight"


def test_default_lock_path(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("XDG_RUNTIME_DIR", str(tmp_path))
    assert default_lock_path() == tmp_path / "blight.lock"
    monkeypatch.delenv("XDG_RUNTIME_DIR")
    assert default_lock_path() == Path(tempfile.gettempdir()) / "blight.lock"
