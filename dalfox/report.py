"""Tabular report of parameter analysis and findings."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from tabulate import tabulate

from dalfox.model import Colorizer, Options, ParamResult, PoC, Result
from dalfox.utils import format_duration

_ZERO_TIME = "0001-01-01 00:00:00 +0000 UTC"


def _colors(options: Options) -> Colorizer:
    return options.colorizer if options.colorizer is not None else Colorizer(enabled=False)


def _time_str(moment: datetime | None) -> str:
    return str(moment) if moment is not None else _ZERO_TIME


def _table(headers: Sequence[str], rows: list[list[str]]) -> str:
    return tabulate(
        rows,
        headers=[h.upper() for h in headers],
        tablefmt="psql",
        disable_numparse=True,
    )


def generate_report(scan_result: Result, options: Options) -> None:
    """Print the full scan report to stdout."""
    print(_colors(options).bright_green("[ Information ]"))
    print("+ Start: " + _time_str(scan_result.start_time))
    print("+ End: " + _time_str(scan_result.end_time))
    print("+ Duration: " + format_duration(scan_result.duration))
    render_table(scan_result.params, options)
    render_poc_table(scan_result.pocs, options)


def render_table(params: Sequence[ParamResult], options: Options) -> None:
    """Print the parameter analysis table."""
    rows = [
        [
            p.name,
            p.type,
            "true" if p.reflected else "false",
            p.reflected_point,
            p.reflected_code,
            " ".join(p.chars),
        ]
        for p in params
    ]
    print(_colors(options).bright_green("\n[ Parameter Analysis ]"))
    print(_table(["Param", "Type", "Reflected", "R-Point", "R-Code", "Chars"], rows))


def render_poc_table(pocs: Sequence[PoC], options: Options) -> None:
    """Print the findings table followed by each PoC's data."""
    rows = [
        [f"#{i}", p.type, p.severity, p.method, p.param, p.inject_type, p.cwe]
        for i, p in enumerate(pocs)
    ]
    print(_colors(options).bright_green("\n[ XSS PoCs ]"))
    print(_table(["#", "Type", "Severity", "Method", "Param", "Inject-Type", "CWE"], rows))
    for i, p in enumerate(pocs):
        print(f"[#{i}] {p.data}")