from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from blight.errors import NotFoundError, ReadCurrentError, ReadDirError, ReadMaxError

logger = logging.getLogger(__name__)

CURRENT_FILE = "brightness"
MAX_FILE = "max_brightness"

# Large enough to hold the ASCII rendering of 2**32 - 1.
_BUF_LEN = 10


@dataclass
class Info:
    current: int
    max: int
    brightness: BinaryIO
    path: Path


def read_ascii_u32(source: BinaryIO) -> int:
    """Parse the ASCII integer held by a sysfs attribute.

    At most ten bytes are read, one trailing newline is dropped and the cursor
    is rewound to the start so the handle can be written to right away.
    """

    buf = source.read(_BUF_LEN)
    source.seek(0)
    read = len(buf) if buf else 0
    if read == 0 or read > _BUF_LEN:
        raise ValueError(f"read too few or too many bytes: {read} bytes into buf of len {_BUF_LEN}")

    digits = buf[:-1] if buf.endswith(b"\n") else buf
    if not digits:
        raise ValueError("no digits to parse")

    value, place = 0, 10 ** (len(digits) - 1)
    for b in digits:
        if not 0x30 <= b <= 0x39:
            raise ValueError(f"invalid ASCII digit: {bytes([b])!r}")
        value += (b - 0x30) * place
        place //= 10
    return value


def write_ascii_u32(sink: BinaryIO, value: int) -> None:
    data = str(int(value)).encode("ascii")
    sink.write(data)
    # Regular files keep stale digits past a shorter value otherwise.
    sink.truncate(sink.tell())


def construct_path(root: str | Path, name: str) -> Path:
    return Path(root) / name


def list_interfaces(root: str | Path) -> list[str]:
    try:
        # Sorted, so "first entry" means first by name. That decides detection
        # ties such as two amd/intel devices, and the fallback.
        return sorted(os.listdir(root))
    except OSError as e:
        raise ReadDirError(str(root)) from e


def read_info(root: str | Path, interface: str) -> Info:
    """Read everything needed to drive the interface ``root/interface``."""

    path = construct_path(root, interface)
    if not path.is_dir():
        raise NotFoundError()

    try:
        with open(path / MAX_FILE, "rb", buffering=0) as f:
            maximum = read_ascii_u32(f)
    except (OSError, ValueError) as e:
        raise ReadMaxError() from e

    try:
        brightness = open(path / CURRENT_FILE, "r+b", buffering=0)
    except OSError as e:
        raise ReadCurrentError() from e
    try:
        current = read_ascii_u32(brightness)
    except (OSError, ValueError) as e:
        brightness.close()
        raise ReadCurrentError() from e

    logger.debug("read %s: current=%d max=%d", path, current, maximum)
    return Info(current=current, max=maximum, brightness=brightness, path=path)
