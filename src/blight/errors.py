from __future__ import annotations

from enum import Enum

_WRITE_TIP = """Make sure you have write permission to the file '{path}/brightness'
Run `sudo blight setup` to install necessary udev rules and add user to video group.
Or visit https://wiki.archlinux.org/title/Backlight#Hardware_interfaces
if you'd like to do it manually."""


class ErrorKind(Enum):
    READ_DIR = "read_dir"
    NOT_FOUND = "not_found"
    READ_MAX = "read_max"
    READ_CURRENT = "read_current"
    WRITE_VALUE = "write_value"
    VALUE_TOO_LARGE = "value_too_large"
    SWEEP = "sweep"


class BlightError(Exception):
    """Base class of every error raised by the device layer.

    The underlying I/O error, when there is one, is attached as ``__cause__``
    (``raise ... from err``) and exposed as :attr:`source`.
    """

    kind: ErrorKind

    def description(self) -> str:
        raise NotImplementedError

    @property
    def hint(self) -> str | None:
        return None

    @property
    def source(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        msg = self.description()
        if self.source is not None:
            msg = f"{msg} ({self.source})"
        if self.hint:
            msg = f"{msg}\nTip: {self.hint}"
        return msg


class ReadDirError(BlightError):
    kind = ErrorKind.READ_DIR

    def __init__(self, dir: str) -> None:
        super().__init__(dir)
        self.dir = dir

    def description(self) -> str:
        return f"Failed to read {self.dir} directory"


class NotFoundError(BlightError):
    kind = ErrorKind.NOT_FOUND

    def description(self) -> str:
        return "No known device detected"

    @property
    def hint(self) -> str | None:
        return "Run `blight list` to see the available devices"


class ReadMaxError(BlightError):
    kind = ErrorKind.READ_MAX

    def description(self) -> str:
        return "Failed to read max brightness value"


class ReadCurrentError(BlightError):
    kind = ErrorKind.READ_CURRENT

    def description(self) -> str:
        return "Failed to read current brightness value"


class WriteValueError(BlightError):
    kind = ErrorKind.WRITE_VALUE

    def __init__(self, device: str, path: str | None = None) -> None:
        super().__init__(device)
        self.device = device
        self.path = path

    def description(self) -> str:
        return f"Failed to write to the brightness file of {self.device}"

    @property
    def hint(self) -> str | None:
        return _WRITE_TIP.format(path=self.path or self.device)


class ValueTooLargeError(BlightError):
    kind = ErrorKind.VALUE_TOO_LARGE

    def __init__(self, given: int, supported: int) -> None:
        super().__init__(given, supported)
        self.given = given
        self.supported = supported

    def description(self) -> str:
        return (
            f"Provided value ({self.given}) is larger than "
            f"the max supported value of {self.supported}"
        )


class SweepError(BlightError):
    kind = ErrorKind.SWEEP

    def description(self) -> str:
        return "Failed to sweep write to the brightness file"
