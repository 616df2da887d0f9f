"""Excerpts of reflected code and parsing of the only-poc filter."""

from __future__ import annotations

_SEPARATOR = "\n    "


def code_view(resbody: str, pattern: str) -> str:
    """Return numbered excerpts of each line of resbody that contains pattern."""
    if not resbody:
        return ""
    parts = []
    for number, line in enumerate(resbody.split("\n"), start=1):
        index = line.find(pattern)
        if index < 0:
            continue
        start = index - 20 if index > 20 else 0
        end = min(start + 80, len(line))
        parts.append(f"{number} line:  {line[start:end]}{_SEPARATOR}")
    code = "".join(parts)
    if len(code) > 4:
        return code[:-len(_SEPARATOR)]
    return code


def check_to_show_poc(patterns: str) -> tuple[bool, bool, bool]:
    """Parse a comma-separated filter into (grep, reflected, verified) flags."""
    selected = set(patterns.split(","))
    return "g" in selected, "r" in selected, "v" in selected