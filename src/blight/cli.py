from __future__ import annotations

import argparse
import logging
import sys

from blight import __version__
from blight.backlight import Device, change_bl, list_devices, set_bl
from blight.errors import BlightError
from blight.led import led_names
from blight.light import Change, Direction
from blight.lock import LockError, instance_lock
from blight.snapshot import SnapshotError, restore, save
from blight.system.permissions import check_write_perm, run_setup
from blight.system.sysfs import CURRENT_FILE

EXAMPLES = """\
Examples:
    sudo blight setup
    blight status (show backlight device status info)
    blight inc 5 --sweep (increase brightness smoothly by 5%)
    blight set 10 (sets the brightness value to 10)
    blight inc 2 -s -d nvidia_0 (increases nvidia_0's brightness smoothly by 2%)"""

SUCCESS = {
    "save": "Current backlight state saved",
    "restore": "Saved backlight state restored",
    "set": "Backlight value set",
    "inc": "Backlight changed",
    "dec": "Backlight changed",
}


def _non_negative(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        value = -1
    if value < 0:
        raise argparse.ArgumentTypeError(
            f"invalid value {raw!r}: make sure the value is a valid positive integer"
        )
    return value


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="blight",
        description="A backlight utility for Linux that plays well with hybrid GPUs",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("--version", action="version", version=__version__)
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    dev = argparse.ArgumentParser(add_help=False)
    dev.add_argument(
        "-d", "--device", help="Backlight device to target instead of the detected one"
    )

    sweep = argparse.ArgumentParser(add_help=False)
    sweep.add_argument(
        "-s", "--sweep", action="store_true", help="Change brightness gradually"
    )

    sub = ap.add_subparsers(dest="cmd")

    sub.add_parser(
        "setup", help="Install udev rules and add user to video group (run with sudo)"
    )
    sub.add_parser("status", parents=[dev], help="Backlight device status")

    ls = sub.add_parser("list", help="List all backlight devices")
    ls.add_argument("--leds", action="store_true", help="List LEDs instead")

    sub.add_parser("save", parents=[dev], help="Save current brightness to restore later")
    sub.add_parser("restore", help="Restore saved brightness value")

    st = sub.add_parser("set", parents=[dev], help="Set custom brightness value")
    st.add_argument("value", type=_non_negative)

    for name, what in (("inc", "Increase"), ("dec", "Decrease")):
        p = sub.add_parser(name, parents=[dev, sweep], help=f"{what} brightness by a percentage")
        p.add_argument("value", type=_non_negative)

    return ap


def _print_status(device_name: str | None) -> None:
    with Device.new(device_name) as device:
        try:
            check_write_perm(device.device_path / CURRENT_FILE)
            write_perm = "Ok"
        except OSError as e:
            write_perm = str(e)
        print("Device status")
        print(f"Detected device: {device.name}")
        print(f"Write permission: {write_perm}")
        print(f"Current brightness: {device.current} ({device.current_percent():.0f}%)")
        print(f"Max brightness: {device.max}")


def _print_devices(leds: bool) -> None:
    if leds:
        print("Detected LEDs")
        for n in led_names():
            print(
                f"{n.raw} (name: {n.parsed_name or '-'}, "
                f"color: {n.color.value}, function: {n.function.value})"
            )
    else:
        print("Detected Devices")
        for name in list_devices():
            print(name)


def _execute(args: argparse.Namespace) -> None:
    cmd = args.cmd
    if cmd == "setup":
        run_setup(sys.stdout)
    elif cmd == "status":
        _print_status(args.device)
    elif cmd == "list":
        _print_devices(args.leds)
    elif cmd == "save":
        save(args.device)
    else:
        with instance_lock():
            if cmd == "restore":
                restore()
            elif cmd == "set":
                set_bl(args.value, args.device)
            else:
                change_bl(
                    args.value,
                    Change.SWEEP if args.sweep else Change.REGULAR,
                    Direction.INC if cmd == "inc" else Direction.DEC,
                    args.device,
                )


def main(argv: list[str] | None = None) -> None:
    ap = _build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd is None:
        ap.print_help()
        return

    try:
        _execute(args)
    except (BlightError, SnapshotError, LockError, OSError) as e:
        print(f"Error {e}", file=sys.stderr)
        raise SystemExit(1) from e

    msg = SUCCESS.get(args.cmd)
    if msg:
        print(f"Success {msg}")
