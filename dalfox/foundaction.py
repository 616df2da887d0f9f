"""Running a user command when a finding is made."""

from __future__ import annotations

import subprocess

from dalfox.logger import dal_log
from dalfox.model import Options


def build_found_action(options: Options, target: str, query: str, ptype: str) -> str:
    """Return the found-action command with its placeholders filled in."""
    return (
        options.found_action.replace("@@query@@", query)
        .replace("@@target@@", target)
        .replace("@@type@@", ptype)
    )


def found_action(options: Options, target: str, query: str, ptype: str) -> bool:
    """Run the found-action command in the configured shell; return whether it succeeded."""
    command = build_found_action(options, target, query, ptype)
    try:
        completed = subprocess.run(
            [options.found_action_shell, "-c", command],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
        ok = completed.returncode == 0
    except OSError:
        ok = False
    if not ok:
        dal_log("ERROR", "execution error from found-action", options)
    return ok