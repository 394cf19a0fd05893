from __future__ import annotations

import logging
from pathlib import Path

from blight.errors import NotFoundError
from blight.light import Change, Delay, Dimmable, Direction
from blight.system.sysfs import list_interfaces, read_info

logger = logging.getLogger(__name__)

# Linux backlight directory. All backlight hardware devices appear here.
BLDIR = "/sys/class/backlight"


def _root(root: str | Path | None) -> str | Path:
    return BLDIR if root is None else root


def list_devices(root: str | Path | None = None) -> list[str]:
    return list_interfaces(_root(root))


def detect_device(root: str | Path | None = None) -> str:
    """Pick the backlight device to drive when none was named.

    Priority: AMD or Intel (integrated GPU) > Nvidia > ACPI > first device.
    """

    # Names arrive sorted; the first amd/intel match by name wins.
    dirs = list_devices(root)
    nv: str | None = None
    ac: str | None = None

    for name in dirs:
        if "amd" in name or "intel" in name:
            logger.debug("detected backlight device %s", name)
            return name
        elif nv is None and ("nvidia" in name or "nv" in name):
            nv = name
        elif ac is None and "acpi" in name:
            ac = name

    for candidate in (nv, ac, dirs[0] if dirs else None):
        if candidate is not None:
            logger.debug("detected backlight device %s", candidate)
            return candidate
    raise NotFoundError()


class Device(Dimmable):
    """A backlight device from ``/sys/class/backlight``.

    Create one with :meth:`Device.new`; without a name the device is picked
    by :func:`detect_device`.
    """

    @classmethod
    def new(cls, name: str | None = None, *, root: str | Path | None = None) -> Device:
        root = _root(root)
        if name is None:
            name = detect_device(root)
        return cls(name, read_info(root, name))


def change_bl(
    step_size: int,
    change: Change,
    direction: Direction,
    device_name: str | None = None,
) -> None:
    """Change the backlight by ``step_size`` percent.

    No write happens when the computed value equals the current one.
    """

    with Device.new(device_name) as device:
        value = device.calculate_change(step_size, direction)
        if value != device.current:
            if change is Change.SWEEP:
                device.sweep_write(value, Delay())
            else:
                device.write_value(value)


def set_bl(value: int, device_name: str | None = None) -> None:
    with Device.new(device_name) as device:
        if value != device.current:
            device.write_value(value)
