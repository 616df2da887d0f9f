"""Library entry points: scan options for callers and their expansion into full options."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

from dalfox.model import Colorizer, Options, ParamResult, PoC

_STRING_OVERRIDES = (
    "cookie",
    "blind_url",
    "custom_alert_value",
    "custom_alert_type",
    "data",
    "user_agent",
    "proxy_address",
    "grep",
    "ignore_return",
    "trigger",
    "trigger_method",
    "remote_payloads",
    "remote_wordlists",
    "poc_type",
    "custom_payload_file",
    "output_file",
    "found_action",
    "found_action_shell",
)

_INT_OVERRIDES = ("timeout", "concurrence", "delay")

_TRUE_OVERRIDES = (
    "only_discovery",
    "follow_redirect",
    "mining",
    "finding_dom",
    "no_bav",
    "no_grep",
    "only_custom_payload",
    "use_deep_dxss",
    "waf_evasion",
    "use_bav",
)

_LIST_OVERRIDES = ("uniq_param", "header", "ignore_params")


@dataclass
class LibOptions:
    """Options a library caller may set; empty values keep the defaults."""

    uniq_param: list[str] = field(default_factory=list)
    cookie: str = ""
    header: list[str] = field(default_factory=list)
    blind_url: str = ""
    custom_payload_file: str = ""
    custom_alert_value: str = ""
    custom_alert_type: str = ""
    data: str = ""
    user_agent: str = ""
    output_file: str = ""
    found_action: str = ""
    found_action_shell: str = ""
    proxy_address: str = ""
    grep: str = ""
    ignore_return: str = ""
    ignore_params: list[str] = field(default_factory=list)
    trigger: str = ""
    trigger_method: str = ""
    sequence: int = 0
    timeout: int = 0
    concurrence: int = 0
    delay: int = 0
    only_discovery: bool = False
    only_custom_payload: bool = False
    follow_redirect: bool = False
    mining: bool = False
    finding_dom: bool = False
    no_bav: bool = False
    no_grep: bool = False
    use_headless: bool = False
    use_deep_dxss: bool = False
    remote_payloads: str = ""
    remote_wordlists: str = ""
    poc_type: str = ""
    waf_evasion: bool = False
    har_writer: Any = None
    output_request: bool = False
    output_response: bool = False
    use_bav: bool = False


@dataclass
class Target:
    """A URL to scan together with its method and options."""

    url: str = ""
    method: str = ""
    options: LibOptions = field(default_factory=LibOptions)


@dataclass
class LibResult:
    """Result of a library scan."""

    logs: list[str] = field(default_factory=list)
    pocs: list[PoC] = field(default_factory=list)
    params: list[ParamResult] = field(default_factory=list)
    duration: timedelta = field(default_factory=timedelta)
    start_time: datetime | None = None
    end_time: datetime | None = None

    def is_found(self) -> bool:
        """Return True when the scan produced at least one PoC."""
        return bool(self.pocs)


def _defaults() -> Options:
    return Options(
        is_library=True,
        custom_alert_value="1",
        custom_alert_type="none",
        format="plain",
        found_action_shell="bash",
        timeout=10,
        trigger_method="GET",
        concurrence=100,
        silence=True,
        mining=True,
        finding_dom=True,
        no_color=True,
        method="GET",
        no_spinner=True,
        colorizer=Colorizer(enabled=False),
        start_time=datetime.now(),
        sequence=-1,
        use_headless=True,
    )


def initialize(target: Target, options: LibOptions) -> Options:
    """Expand library options into full scan options with library defaults."""
    result = _defaults()

    for name in _LIST_OVERRIDES:
        getattr(result, name).extend(getattr(options, name))
    if target.method:
        result.method = target.method
    for name in _STRING_OVERRIDES + _INT_OVERRIDES:
        value = getattr(options, name)
        if value:
            setattr(result, name, value)
    for name in _TRUE_OVERRIDES:
        if getattr(options, name):
            setattr(result, name, True)
    if not options.use_headless:
        result.use_headless = False
    if options.sequence != -1:
        result.sequence = options.sequence
    return result