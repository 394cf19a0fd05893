"""LEDs from ``/sys/class/leds``.

An LED whose max brightness is ``1`` only supports on/off and is returned as
a :class:`NonDimmableLed`; every other LED is a :class:`DimmableLed` with the
same interface as a backlight device.

Names following the kernel convention ``devicename:color:function`` are
parsed for extra information, see :class:`LedName`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

from blight.errors import ReadDirError
from blight.light import Dimmable, Light, Toggleable
from blight.system.sysfs import Info, read_info

logger = logging.getLogger(__name__)

# Linux LED interface directory
LEDDIR = "/sys/class/leds"


def _root(root: str | Path | None) -> str | Path:
    return LEDDIR if root is None else root


class Color(Enum):
    WHITE = "white"
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    AMBER = "amber"
    VIOLET = "violet"
    YELLOW = "yellow"
    IR = "ir"
    MULTI = "multi"
    RGB = "rgb"
    PURPLE = "purple"
    ORANGE = "orange"
    PINK = "pink"
    CYAN = "cyan"
    LIME = "lime"
    UNKNOWN = "unknown"

    @classmethod
    def from_token(cls, token: str) -> Color:
        return _COLORS.get(token, cls.UNKNOWN)


class Function(Enum):
    CAPSLOCK = "capslock"
    SCROLLLOCK = "scrolllock"
    NUMLOCK = "numlock"
    FNLOCK = "fnlock"
    KBD_BACKLIGHT = "kbd_backlight"
    POWER = "power"
    DISK = "disk"
    CHARGING = "charging"
    STATUS = "status"
    MICMUTE = "micmute"
    MUTE = "mute"
    PLAYER1 = "player-1"
    PLAYER2 = "player-2"
    PLAYER3 = "player-3"
    PLAYER4 = "player-4"
    PLAYER5 = "player-5"
    ACTIVITY = "activity"
    ALARM = "alarm"
    BACKLIGHT = "backlight"
    BLUETOOTH = "bluetooth"
    BOOT = "boot"
    CPU = "cpu"
    DEBUG = "debug"
    DISK_ACTIVITY = "disk-activity"
    DISK_ERR = "disk-err"
    DISK_READ = "disk-read"
    DISK_WRITE = "disk-write"
    FAULT = "fault"
    FLASH = "flash"
    HEARTBEAT = "heartbeat"
    INDICATOR = "indicator"
    LAN = "lan"
    MAIL = "mail"
    MOBILE = "mobile"
    MTD = "mtd"
    PANIC = "panic"
    PROGRAMMING = "programming"
    RX = "rx"
    SD = "sd"
    SPEED_LAN = "speed-lan"
    SPEED_WAN = "speed-wan"
    STANDBY = "standby"
    TORCH = "torch"
    TX = "tx"
    USB = "usb"
    WAN = "wan"
    WAN_ONLINE = "wan-online"
    WLAN = "wlan"
    WLAN_2GHZ = "wlan-2ghz"
    WLAN_5GHZ = "wlan-5ghz"
    WLAN_6GHZ = "wlan-6ghz"
    WPS = "wps"
    UNKNOWN = "unknown"

    @classmethod
    def from_token(cls, token: str) -> Function:
        return _FUNCTIONS.get(token, cls.UNKNOWN)


_COLORS = {c.value: c for c in Color if c is not Color.UNKNOWN}
_FUNCTIONS = {f.value: f for f in Function if f is not Function.UNKNOWN}


@dataclass(frozen=True)
class LedName:
    """Name of an LED device, split into its parts.

    Parsing never fails. Only names following
    https://www.kernel.org/doc/html/latest/leds/leds-class.html#led-device-naming
    yield a color, a function and a parsed name; anything else keeps
    ``UNKNOWN`` for the missing parts.
    """

    raw: str
    length: int = 0
    color: Color = Color.UNKNOWN
    function: Function = Function.UNKNOWN

    @classmethod
    def parse(cls, raw: str) -> LedName:
        rem, sep, fun = raw.rpartition(":")
        if not sep:
            return cls(raw)
        function = Function.from_token(fun)

        # A single colon leaves no room for a color.
        rem, sep, clr = rem.rpartition(":")
        if not sep:
            return cls(raw, function=function)
        return cls(raw, length=len(rem), color=Color.from_token(clr), function=function)

    @property
    def parsed_name(self) -> str | None:
        return self.raw[: self.length] if self.length else None

    def initialize(self, *, root: str | Path | None = None) -> LedType:
        return Led.from_name(self, root=root)


class Led(Light):
    def __init__(self, name: LedName, info: Info) -> None:
        super().__init__(name.raw, info)
        self._led_name = name

    @classmethod
    def new(cls, name: str | LedName, *, root: str | Path | None = None) -> LedType:
        """Open the LED called ``name``.

        The returned instance is a :class:`NonDimmableLed` when the LED only
        supports ``0`` and ``1``, otherwise a :class:`DimmableLed`.
        """

        if not isinstance(name, LedName):
            name = LedName.parse(name)
        info = read_info(_root(root), name.raw)
        if info.max == 1:
            return NonDimmableLed(name, info)
        return DimmableLed(name, info)

    @classmethod
    def from_name(cls, name: LedName, *, root: str | Path | None = None) -> LedType:
        return cls.new(name, root=root)

    @property
    def led_name(self) -> LedName:
        return self._led_name

    @property
    def color(self) -> Color:
        return self._led_name.color

    @property
    def function(self) -> Function:
        return self._led_name.function

    @property
    def parsed_name(self) -> str | None:
        return self._led_name.parsed_name


class DimmableLed(Led, Dimmable):
    """LED supporting a range of brightness values."""


class NonDimmableLed(Led, Toggleable):
    """LED supporting only ``1`` (on) and ``0`` (off)."""


LedType = Union[DimmableLed, NonDimmableLed]


def led_names(root: str | Path | None = None) -> list[LedName]:
    """Names of all LEDs, without opening any of them."""

    root = Path(_root(root))
    try:
        entries = sorted(p for p in root.iterdir() if p.is_dir())
    except OSError as e:
        raise ReadDirError(str(root)) from e
    return [LedName.parse(p.name) for p in entries]


def leds(root: str | Path | None = None) -> list[LedType]:
    """Open every LED. Fails if any single LED fails to open."""

    return leds_from_names(led_names(root), root=root)


def leds_from_names(
    names: Iterable[LedName], *, root: str | Path | None = None
) -> list[LedType]:
    return [Led.from_name(n, root=root) for n in names]


def set_led_state(led_name: str, state: bool, *, root: str | Path | None = None) -> None:
    """Turn an LED on (``True``) or off (``False``)."""

    with Led.new(led_name, root=root) as led:
        led.write_value(int(state))
