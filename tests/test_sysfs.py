from __future__ import annotations

import io
from pathlib import Path

import pytest

from blight.errors import NotFoundError, ReadCurrentError, ReadDirError, ReadMaxError
from blight.system.sysfs import (
    construct_path,
    list_interfaces,
    read_ascii_u32,
    read_info,
    write_ascii_u32,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(b"123\n", 123), (b"999\n", 999), (b"0", 0), (b"4294967295", 2**32 - 1)],
)
def test_read_ascii_u32(raw: bytes, expected: int) -> None:
    assert read_ascii_u32(io.BytesIO(raw)) == expected


def test_read_ascii_u32_rewinds() -> None:
    src = io.BytesIO(b"42\n")
    read_ascii_u32(src)
    assert src.tell() == 0


@pytest.mark.parametrize("raw", [b"", b"\n", b"12a", b"-1"])
def test_read_ascii_u32_rejects_garbage(raw: bytes) -> None:
    src = io.BytesIO(raw)
    with pytest.raises(ValueError):
        read_ascii_u32(src)
    assert src.tell() == 0


def test_write_ascii_u32_truncates_stale_digits() -> None:
    sink = io.BytesIO(b"100")
    write_ascii_u32(sink, 7)
    assert sink.getvalue() == b"7"


def test_construct_path() -> None:
    assert construct_path("testbldir", "generic") == Path("testbldir/generic")


def test_read_info(make_tree) -> None:
    root = make_tree(["generic"])
    info = read_info(root, "generic")
    try:
        assert info.current == 50
        assert info.max == 100
        assert info.path == root / "generic"
    finally:
        info.brightness.close()


def test_read_info_not_found(make_tree) -> None:
    root = make_tree(["generic"])
    with pytest.raises(NotFoundError):
        read_info(root, "missing")


def test_read_info_bad_max(make_tree) -> None:
    root = make_tree(["generic"])
    (root / "generic" / "max_brightness").unlink()
    with pytest.raises(ReadMaxError) as exc:
        read_info(root, "generic")
    assert isinstance(exc.value.source, OSError)


def test_read_info_bad_current(make_tree) -> None:
    root = make_tree(["generic"])
    (root / "generic" / "brightness").write_text("", encoding="ascii")
    with pytest.raises(ReadCurrentError) as exc:
        read_info(root, "generic")
    assert isinstance(exc.value.source, ValueError)


def test_list_interfaces_missing_dir(tmp_path: Path) -> None:
    with pytest.raises(ReadDirError) as exc:
        list_interfaces(tmp_path / "nope")
    assert exc.value.dir == str(tmp_path / "nope")
