"""General helpers: lookups, content-type filtering, terminal width, tokens."""

from __future__ import annotations

import hashlib
import os
import sys
import time
from collections.abc import Iterable, Sequence
from datetime import timedelta
from urllib.parse import urlsplit

from dalfox.model import PoC

_NOT_SCANNING_TYPES = (
    "application/json",
    "application/javascript",
    "text/javascript",
    "text/plain",
    "text/css",
    "image/jpeg",
    "image/png",
    "image/bmp",
    "image/gif",
    "application/rss+xml",
)

_DEFAULT_WIDTH = 80


def index_of(element: str, data: Sequence[str]) -> int:
    """Return the position of element in data, or -1."""
    try:
        return list(data).index(element)
    except ValueError:
        return -1


def duplicated_result(result: Iterable[PoC], rst: PoC) -> bool:
    """Return True when a PoC of the same type is already in result."""
    return rst.type in {poc.type for poc in result}


def contains_from_array(items: Iterable[str], item: str) -> bool:
    """Return True when the part of item before any '(' is in items."""
    return item.split("(")[0] in set(items)


def check_ptype(text: str) -> bool:
    return "toBlind" not in text and "toGrepping" not in text


def is_allow_type(content_type: str) -> bool:
    """Return False for content types that are not worth scanning."""
    return not any(t in content_type for t in _NOT_SCANNING_TYPES)


def get_terminal_width() -> int:
    """Return the width of the terminal on stdout, or 80."""
    try:
        if sys.stdout.isatty():
            columns = os.get_terminal_size(sys.stdout.fileno()).columns
            if columns > 0:
                return columns
    except (OSError, ValueError, AttributeError):
        pass
    return _DEFAULT_WIDTH


def generate_terminal_width_line(char: str) -> str:
    """Return char repeated to fill the terminal width less five columns."""
    return char * max(0, get_terminal_width() - 5)


def _hostname(target: str) -> str:
    if target.startswith(":"):
        raise ValueError(f"missing protocol scheme: {target!r}")
    netloc = urlsplit(target).netloc.rpartition("@")[2]
    if netloc.startswith("["):
        return netloc[1:].partition("]")[0]
    return netloc.partition(":")[0]


def make_target_slice(targets: Iterable[str]) -> dict[str, list[str]]:
    """Group targets by hostname, skipping those that do not parse."""
    result: dict[str, list[str]] = {}
    for target in targets:
        try:
            hostname = _hostname(target)
        except ValueError:
            continue
        result.setdefault(hostname, []).append(target)
    return result


def generate_random_token(url: str) -> str:
    """Return a scan id made from the current time and url."""
    return hashlib.sha256((str(time.time_ns()) + url).encode()).hexdigest()


def _fraction(value: int, scale: int) -> str:
    whole, frac = divmod(value, scale)
    if not frac:
        return str(whole)
    digits = len(str(scale)) - 1
    return f"{whole}." + f"{frac:0{digits}d}".rstrip("0")


def format_duration(duration: timedelta | int) -> str:
    """Format a timedelta (or nanoseconds) like '1h2m3.5s' or '1.5ms'."""
    if isinstance(duration, timedelta):
        ns = ((duration.days * 86400 + duration.seconds) * 1_000_000 + duration.microseconds) * 1000
    else:
        ns = int(duration)
    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    ns = abs(ns)
    if ns < 1_000_000_000:
        for unit, scale in (("ns", 1), ("µs", 1_000), ("ms", 1_000_000)):
            if ns < scale * 1000:
                return sign + _fraction(ns, scale) + unit
    hours, rest = divmod(ns, 3600 * 1_000_000_000)
    minutes, rest = divmod(rest, 60 * 1_000_000_000)
    out = _fraction(rest, 1_000_000_000) + "s"
    if hours:
        out = f"{hours}h{minutes}m{out}"
    elif minutes:
        out = f"{minutes}m{out}"
    return sign + out