from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """Build a fake sysfs class directory with one subdirectory per interface."""

    def make(names: list[str], current: int = 50, max: int = 100, root: str = "bl") -> Path:
        base = tmp_path / root
        base.mkdir(exist_ok=True)
        for name in names:
            d = base / name
            d.mkdir()
            (d / "brightness").write_text(str(current), encoding="ascii")
            (d / "max_brightness").write_text(str(max), encoding="ascii")
        return base

    return make
