from __future__ import annotations

import io
import subprocess
from pathlib import Path

import pytest

from blight.system import permissions
from blight.system.permissions import (
    RULES,
    GroupResult,
    RulesResult,
    check_write_perm,
    setup_group,
    setup_rules,
)


def test_setup_rules_is_idempotent(tmp_path: Path) -> None:
    rules = tmp_path / "90-blight.rules"
    assert setup_rules(rules) is RulesResult.OK
    assert rules.read_text(encoding="utf-8") == RULES
    assert setup_rules(rules) is RulesResult.EXISTS


def test_check_write_perm(tmp_path: Path) -> None:
    f = tmp_path / "brightness"
    f.write_text("42\n", encoding="ascii")
    check_write_perm(f)
    assert f.read_text(encoding="ascii") == "42\n"


def test_check_write_perm_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        check_write_perm(tmp_path / "brightness")


class FakeRun:
    def __init__(self, groups_out: list[str]) -> None:
        self.groups_out = groups_out
        self.calls: list[list[str]] = []

    def __call__(self, cmd, **_kw):
        self.calls.append(list(cmd))
        out = ""
        if cmd[0] == "logname":
            out = "alice\n"
        elif cmd[0] == "groups":
            out = self.groups_out.pop(0)
        return subprocess.CompletedProcess(cmd, 0, stdout=out)


def test_setup_group_already_member(monkeypatch, tmp_path: Path) -> None:
    fake = FakeRun(["alice : alice wheel video\n"])
    monkeypatch.setattr(permissions.subprocess, "run", fake)
    assert setup_group(tmp_path / "group") is GroupResult.EXISTS
    assert ["usermod", "-aG", "video", "alice"] not in fake.calls


def test_setup_group_creates_group(monkeypatch, tmp_path: Path) -> None:
    group = tmp_path / "group"
    group.write_text("root:x:0:\nwheel:x:10:alice\n", encoding="utf-8")
    fake = FakeRun(["alice : alice wheel\n", "alice : alice wheel video\n"])
    monkeypatch.setattr(permissions.subprocess, "run", fake)
    assert setup_group(group) is GroupResult.OK
    assert ["groupadd", "video"] in fake.calls
    assert ["usermod", "-aG", "video", "alice"] in fake.calls


def test_setup_group_unknown_failure(monkeypatch, tmp_path: Path) -> None:
    group = tmp_path / "group"
    group.write_text("video:x:44:\n", encoding="utf-8")
    fake = FakeRun(["alice : alice\n", "alice : alice\n"])
    monkeypatch.setattr(permissions.subprocess, "run", fake)
    assert setup_group(group) is GroupResult.UNKNOWN_ERR
    assert ["groupadd", "video"] not in fake.calls


def test_run_setup_reports_permission_denied(monkeypatch) -> None:
    def denied(path=None):
        raise PermissionError("denied")

    monkeypatch.setattr(permissions, "setup_rules", denied)
    monkeypatch.setattr(permissions, "setup_group", lambda: GroupResult.EXISTS)
    out = io.StringIO()
    permissions.run_setup(out)
    text = out.getvalue()
    assert "UDEV Rules: Failed. Run `blight setup` with sudo." in text
    assert "Video Group: Ok (already in group)" in text
