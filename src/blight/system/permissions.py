"""Helpers granting the current user write access to backlight brightness files.

Write permission on ``/sys/class/backlight/<device>/brightness`` is handed to
the ``video`` group through udev rules, and the user is added to that group.
"""

from __future__ import annotations

import logging
import subprocess
from enum import Enum
from pathlib import Path
from typing import TextIO

logger = logging.getLogger(__name__)

RULES = '''ACTION=="add", SUBSYSTEM=="backlight", RUN+="/bin/chgrp video /sys/class/backlight/%k/brightness"
ACTION=="add", SUBSYSTEM=="backlight", RUN+="/bin/chmod g+w /sys/class/backlight/%k/brightness"'''
UDEVFILE = "/lib/udev/rules.d/90-blight.rules"
GROUP = "video"
GROUP_FILE = "/etc/group"


class RulesResult(Enum):
    OK = "ok"
    EXISTS = "exists"


class GroupResult(Enum):
    OK = "ok"
    EXISTS = "exists"
    UNKNOWN_ERR = "unknown_err"


def check_write_perm(path: str | Path) -> None:
    """Raise OSError unless ``path`` can be written to.

    The file is rewritten with its own contents, so nothing changes.
    """

    p = Path(path)
    contents = p.read_text(encoding="ascii")
    p.write_text(contents, encoding="ascii")


def setup_rules(path: str | Path | None = None) -> RulesResult:
    p = Path(UDEVFILE if path is None else path)
    if p.exists() and RULES in p.read_text(encoding="utf-8"):
        return RulesResult.EXISTS
    p.write_text(RULES, encoding="utf-8")
    logger.debug("wrote udev rules to %s", p)
    return RulesResult.OK


def _output(cmd: list[str]) -> str:
    return subprocess.run(cmd, capture_output=True, text=True, check=False).stdout  # noqa: S603


def current_user() -> str:
    return _output(["logname"]).strip()


def in_group(user: str, group: str = GROUP) -> bool:
    return group in _output(["groups", user]).split()


def add_to_group(user: str, group: str = GROUP) -> None:
    subprocess.run(  # noqa: S603,S607
        ["usermod", "-aG", group, user], stderr=subprocess.DEVNULL, check=False
    )


def setup_group(group_file: str | Path = GROUP_FILE) -> GroupResult:
    user = current_user()
    if in_group(user):
        return GroupResult.EXISTS

    if GROUP not in Path(group_file).read_text(encoding="utf-8"):
        subprocess.run(["groupadd", GROUP], stderr=subprocess.DEVNULL, check=False)  # noqa: S603,S607
    add_to_group(user)

    if in_group(user):
        return GroupResult.OK
    return GroupResult.UNKNOWN_ERR


def run_setup(out: TextIO) -> None:
    """Install the udev rules and join the video group, reporting each step to ``out``."""

    out.write("Running Setup\n")
    out.write("UDEV Rules: ")
    try:
        res = setup_rules()
    except PermissionError:
        out.write("Failed. Run `blight setup` with sudo.\n")
    except OSError as e:
        out.write(f"Error: {e}\n")
    else:
        out.write("Ok\n" if res is RulesResult.OK else "Ok (already in place)\n")

    out.write("Video Group: ")
    try:
        group = setup_group()
    except OSError as e:
        out.write(f"Error: {e}\n")
    else:
        if group is GroupResult.EXISTS:
            out.write("Ok (already in group)\n")
        elif group is GroupResult.OK:
            out.write("Ok\n")
        else:
            out.write("Failed. Run `blight setup` with sudo.\n")

    out.write(
        "Recommended: Reboot your system once the setup completes successfully.\n"
        "You can run `blight status` to check if you have gained write permissions.\n"
    )
