"""Data model shared by the scanner: options, findings and results."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

_RESET = "\x1b[0m"


class Colorizer:
    """Wraps text in ANSI colour codes when enabled, otherwise returns it unchanged."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    def _wrap(self, code: str, text: str) -> str:
        if not self.enabled:
            return text
        return f"\x1b[{code}m{text}{_RESET}"

    def bright_green(self, text: str) -> str:
        return self._wrap("92", text)

    def bright_red(self, text: str) -> str:
        return self._wrap("91", text)

    def bright_yellow(self, text: str) -> str:
        return self._wrap("93", text)

    def bright_blue(self, text: str) -> str:
        return self._wrap("94", text)

    def bright_magenta(self, text: str) -> str:
        return self._wrap("95", text)

    def green(self, text: str) -> str:
        return self._wrap("32", text)

    def yellow(self, text: str) -> str:
        return self._wrap("33", text)

    def white(self, text: str) -> str:
        return self._wrap("37", text)

    def gray(self, level: int, text: str) -> str:
        """Colour text with a shade from the 24-step grayscale ramp (0..23)."""
        level = max(0, min(23, level))
        return self._wrap(f"38;5;{232 + level}", text)


@dataclass
class PoC:
    """A single proof of concept found by a scan."""

    type: str = ""
    inject_type: str = ""
    poc_type: str = ""
    method: str = ""
    data: str = ""
    param: str = ""
    payload: str = ""
    evidence: str = ""
    cwe: str = ""
    severity: str = ""
    message_id: int = 0
    message_str: str = ""
    raw_request: str = ""
    raw_response: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation, omitting empty optional fields."""
        out: dict[str, Any] = {
            "type": self.type,
            "inject_type": self.inject_type,
            "poc_type": self.poc_type,
            "method": self.method,
            "data": self.data,
            "param": self.param,
            "payload": self.payload,
            "evidence": self.evidence,
            "cwe": self.cwe,
            "severity": self.severity,
        }
        optional = {
            "message_id": self.message_id,
            "message_str": self.message_str,
            "raw_request": self.raw_request,
            "raw_response": self.raw_response,
        }
        out.update({key: value for key, value in optional.items() if value})
        return out


@dataclass
class ParamResult:
    """Outcome of analysing one parameter."""

    name: str = ""
    type: str = ""
    reflected: bool = False
    reflected_point: str = ""
    reflected_code: str = ""
    chars: list[str] = field(default_factory=list)
    code: str = ""


@dataclass
class Result:
    """Result of a scan for library and command-line use."""

    logs: list[str] = field(default_factory=list)
    pocs: list[PoC] = field(default_factory=list)
    params: list[ParamResult] = field(default_factory=list)
    duration: timedelta = field(default_factory=timedelta)
    start_time: datetime | None = None
    end_time: datetime | None = None


@dataclass
class Param:
    """A parameter discovered during analysis."""

    type: str = ""
    key: str = ""
    value: str = ""
    reflect: bool = False
    smap: str = ""


@dataclass
class MassJob:
    """A named batch of URLs."""

    name: str = ""
    urls: list[str] = field(default_factory=list)


@dataclass
class Scan:
    """State of one scan in server mode."""

    url: str = ""
    scan_id: str = ""
    logs: list[str] = field(default_factory=list)
    results: list[PoC] = field(default_factory=list)


@dataclass
class Issue:
    """An issue attached to a parameter."""

    type: str = ""
    param: str = ""
    poc: PoC = field(default_factory=PoC)


@dataclass
class Options:
    """All scan options."""

    uniq_param: list[str] = field(default_factory=list)
    cookie: str = ""
    header: list[str] = field(default_factory=list)
    config_file: str = ""
    blind_url: str = ""
    custom_payload_file: str = ""
    custom_alert_value: str = ""
    custom_alert_type: str = ""
    data: str = ""
    user_agent: str = ""
    output_file: str = ""
    format: str = ""
    found_action: str = ""
    found_action_shell: str = ""
    proxy_address: str = ""
    grep: str = ""
    ignore_return: str = ""
    ignore_params: list[str] = field(default_factory=list)
    trigger: str = ""
    timeout: int = 0
    concurrence: int = 0
    max_cpu: int = 0
    delay: int = 0
    all_urls: int = 0
    now_url: int = 0
    sequence: int = 0
    only_discovery: bool = False
    only_custom_payload: bool = False
    silence: bool = False
    is_api: bool = False
    is_library: bool = False
    mass: bool = False
    multicast_mode: bool = False
    scan: dict[str, Scan] = field(default_factory=dict)
    follow_redirect: bool = False
    mining: bool = False
    finding_dom: bool = False
    mining_wordlist: str = ""
    no_color: bool = False
    method: str = ""
    trigger_method: str = ""
    no_spinner: bool = False
    no_bav: bool = False
    server_host: str = ""
    server_port: int = 0
    no_grep: bool = False
    debug: bool = False
    cookie_from_raw: str = ""
    scan_result: Result = field(default_factory=Result)
    spinner: Any = None
    colorizer: Colorizer | None = None
    start_time: datetime | None = None
    har_writer: Any = None
    path_reflection: dict[int, str] = field(default_factory=dict)
    remote_payloads: str = ""
    remote_wordlists: str = ""
    use_headless: bool = False
    use_deep_dxss: bool = False
    only_poc: str = ""
    output_all: bool = False
    waf: bool = False
    waf_name: str = ""
    waf_evasion: bool = False
    poc_type: str = ""
    lock: threading.Lock | None = None
    report_format: str = ""
    report_bool: bool = False
    output_request: bool = False
    output_response: bool = False
    use_bav: bool = False
    custom_transport: Any = None
    skip_discovery: bool = False
    limit_result: int = 0
    force_headless_verification: bool = False