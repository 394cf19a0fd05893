"""Backlight and LED control through the Linux sysfs interfaces.

Backlight devices are detected in this order: AMD or Intel > Nvidia > ACPI >
any other device. Brightness can be written directly or swept one percent at
a time for a smooth transition.

Write permission on ``/sys/class/backlight/<device>/brightness`` is needed to
change brightness; ``sudo blight setup`` installs udev rules granting it.
"""

from blight.backlight import BLDIR, Device, change_bl, detect_device, list_devices, set_bl
from blight.errors import (
    BlightError,
    ErrorKind,
    NotFoundError,
    ReadCurrentError,
    ReadDirError,
    ReadMaxError,
    SweepError,
    ValueTooLargeError,
    WriteValueError,
)
from blight.light import Change, Delay, Dimmable, Direction, Light, Toggleable

__version__ = "0.7.1"

__all__ = [
    "BLDIR",
    "BlightError",
    "Change",
    "Delay",
    "Device",
    "Dimmable",
    "Direction",
    "ErrorKind",
    "Light",
    "NotFoundError",
    "ReadCurrentError",
    "ReadDirError",
    "ReadMaxError",
    "SweepError",
    "Toggleable",
    "ValueTooLargeError",
    "WriteValueError",
    "change_bl",
    "detect_device",
    "list_devices",
    "set_bl",
]
