"""Interface shared by backlight devices and LEDs.

Capabilities are split across three classes so that a type checker can tell
them apart:

- :class:`Light` reads state and writes raw values,
- :class:`Toggleable` adds :meth:`Toggleable.toggle`,
- :class:`Dimmable` adds sweeping, step calculation and percentages.

A binary-only LED is a ``Toggleable`` and never a ``Dimmable``, so calling
``sweep_write`` on one is rejected statically rather than at runtime.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from pathlib import Path
from types import TracebackType
from typing import TypeVar

from blight.errors import ReadCurrentError, SweepError, ValueTooLargeError, WriteValueError
from blight.system.sysfs import Info, read_ascii_u32, write_ascii_u32

logger = logging.getLogger(__name__)

_L = TypeVar("_L", bound="Light")


class Direction(Enum):
    INC = "inc"
    DEC = "dec"


class Change(Enum):
    REGULAR = "regular"
    SWEEP = "sweep"


@dataclass(frozen=True)
class Delay:
    """Pause between two iterations of :meth:`Dimmable.sweep_write`.

    The default of 25 ms gives a smooth transition.
    """

    seconds: float = 0.025

    @classmethod
    def from_millis(cls, millis: int) -> Delay:
        return cls(millis / 1000)

    @classmethod
    def from_timedelta(cls, td: timedelta) -> Delay:
        return cls(td.total_seconds())


class Light:
    def __init__(self, name: str, info: Info) -> None:
        self._name = name
        self._current = info.current
        self._max = info.max
        self._path = info.path
        self._brightness = info.brightness

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self._name!r}, "
            f"current={self._current}, max={self._max})"
        )

    def __enter__(self: _L) -> _L:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._brightness.close()

    @property
    def name(self) -> str:
        return self._name

    @property
    def current(self) -> int:
        """Cached brightness value; call :meth:`reload` to resynchronize."""
        return self._current

    @property
    def max(self) -> int:
        return self._max

    @property
    def device_path(self) -> Path:
        return self._path

    def try_reload(self) -> None:
        try:
            self._current = read_ascii_u32(self._brightness)
        except (OSError, ValueError) as e:
            raise ReadCurrentError() from e

    def reload(self) -> None:
        """Re-read the current brightness value.

        A failure here means the device went away after it was opened, which
        is treated as fatal. Use :meth:`try_reload` to handle it instead.
        """

        try:
            self.try_reload()
        except ReadCurrentError as e:
            raise RuntimeError("Failed to read current brightness value") from e

    def write_value(self, value: int) -> None:
        """Write ``value`` to the brightness file.

        The cached :attr:`current` is left untouched.
        """

        if value < 0:
            raise ValueError(f"brightness value must not be negative: {value}")
        if value > self._max:
            raise ValueTooLargeError(given=value, supported=self._max)

        try:
            write_ascii_u32(self._brightness, value)
            self._brightness.seek(0)
        except OSError as e:
            raise WriteValueError(self._name, str(self._path)) from e
        logger.debug("wrote %d to %s", value, self._path)


class Toggleable(Light):
    def toggle(self) -> None:
        """Flip between ``0`` and :attr:`max`."""

        value = 0 if self._current == self._max else self._max
        self.write_value(value)


class Dimmable(Toggleable):
    def current_percent(self) -> float:
        # Some firmware reports max_brightness as 0.
        if self._max == 0:
            return 0.0
        return (self._current / self._max) * 100

    def calculate_change(self, step_size: int, direction: Direction) -> int:
        """Return the value ``step_size`` percent away from the current one.

        The result is always within ``0..=max`` and can be passed straight to
        :meth:`write_value` or :meth:`sweep_write`.
        """

        step = int(self._max * (step_size / 100))
        if direction is Direction.INC:
            change = self._current + step
        else:
            change = max(self._current - step, 0)
        return min(change, self._max)

    def sweep_write(self, value: int, delay: Delay = Delay()) -> None:
        """Move from the cached current value to ``value`` one percent at a time.

        Nothing is written when ``value`` equals the current value or is
        larger than :attr:`max`. An I/O failure stops the sweep where it is.
        """

        current, maximum = self._current, self._max
        rate = int(maximum * 0.01)
        direction = Direction.INC if value > current else Direction.DEC
        bfile = self._brightness

        if rate == 0 and value != current and value <= maximum:
            logger.warning("sweep rate for %s is 0 (max=%d)", self._name, maximum)
        logger.debug("sweeping %s from %d to %d", self._name, current, value)

        try:
            while not (
                current == value
                or value > maximum
                or (current == 0 and direction is Direction.DEC)
                or (current == maximum and direction is Direction.INC)
            ):
                if direction is Direction.INC:
                    if current + rate > value:
                        rate = value - current
                    current += rate
                else:
                    if rate > current:
                        rate = current
                    if current - rate < value:
                        rate = current - value
                    current -= rate
                bfile.seek(0)
                write_ascii_u32(bfile, current)
                self._current = current
                time.sleep(delay.seconds)
            bfile.seek(0)
        except OSError as e:
            try:
                bfile.seek(0)
            except OSError:
                logger.debug("could not rewind %s after failed sweep", self._path)
            raise SweepError() from e
