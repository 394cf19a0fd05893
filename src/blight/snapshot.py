from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from blight.backlight import Device
from blight.paths import default_save_dir

logger = logging.getLogger(__name__)

SAVE_FILE = "blight.save"


class SnapshotError(ValueError):
    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        msg = super().__str__()
        if self.hint:
            msg = f"{msg}\nTip: {self.hint}"
        return msg


@dataclass(frozen=True)
class Snapshot:
    device: str
    brightness: int


def _require(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise SnapshotError(f"Missing required save key: {key}")
    return data[key]


def _save_path(save_dir: str | Path | None) -> Path:
    return Path(default_save_dir() if save_dir is None else save_dir) / SAVE_FILE


def validate(data: dict[str, Any]) -> Snapshot:
    device = _require(data, "device")
    if not isinstance(device, str) or not device:
        raise SnapshotError("Failed to parse saved brightness value: device must be a name")

    brightness = _require(data, "brightness")
    if isinstance(brightness, bool) or not isinstance(brightness, int) or brightness < 0:
        raise SnapshotError(
            "Failed to parse saved brightness value: brightness must be a positive integer"
        )
    return Snapshot(device=device, brightness=brightness)


def load(path: str | Path) -> Snapshot:
    p = Path(path)
    if not p.is_file():
        raise SnapshotError("No save file found", hint="Try using 'blight save' first")
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise SnapshotError(f"Failed to read from save file\n{e}") from e
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SnapshotError("Failed to parse saved brightness value") from e
    if not isinstance(data, dict):
        raise SnapshotError("Failed to parse saved brightness value")
    return validate(data)


def dump(snapshot: Snapshot, path: str | Path) -> None:
    p = Path(path)
    text = yaml.safe_dump({"device": snapshot.device, "brightness": snapshot.brightness})
    try:
        p.write_text(text, encoding="utf-8")
    except OSError as e:
        raise SnapshotError(f"Failed to write to save file at {p}") from e


def save(device_name: str | None = None, save_dir: str | Path | None = None) -> Path:
    """Store the current brightness of a device so :func:`restore` can bring it back."""

    with Device.new(device_name) as device:
        snapshot = Snapshot(device=device.name, brightness=device.current)

    path = _save_path(save_dir)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise SnapshotError(f"Failed to create save directory at {path.parent}") from e
    dump(snapshot, path)
    logger.debug("saved %s to %s", snapshot, path)
    return path


def restore(save_dir: str | Path | None = None) -> Snapshot:
    snapshot = load(_save_path(save_dir))
    with Device.new(snapshot.device) as device:
        device.write_value(snapshot.brightness)
    logger.debug("restored %s", snapshot)
    return snapshot
