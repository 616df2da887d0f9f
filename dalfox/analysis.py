"""Parameter mining helpers, CSP bypass hints and verification status checks."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from urllib.parse import SplitResult, parse_qs, urlsplit

from dalfox.model import Options

MINING_CHECK_PARAM = "pleasedonthaveanamelikethis_plz_plz"

_CSP_DOMAINS = (
    ".doubleclick.net", ".googleadservices.com", "cse.google.com", "accounts.google.com", "*.google.com",
    "www.blogger.com", "*.blogger.com", "translate.yandex.net", "api-metrika.yandex.ru", "api.vk.com",
    "*.vk.com", "*.yandex.ru", "*.yandex.net", "app-sjint.marketo.com", "app-e.marketo.com", "*.marketo.com",
    "detector.alicdn.com", "suggest.taobao.com", "ount.tbcdn.cn", "bebezoo.1688.com", "wb.amap.com",
    "a.sm.cn", "api.m.sm.cn", "*.alicdn.com", "*.taobao.com", "*.tbcdn.cn", "*.1688.com", "*.amap.com",
    "*.sm.cn", "mkto.uber.com", "*.uber.com", "ads.yap.yahoo.com", "mempf.yahoo.co.jp", "suggest-shop.yahooapis.jp",
    "www.aol.com", "df-webservices.comet.aol.com", "api.cmi.aol.com", "ui.comet.aol.com", "portal.pf.aol.com",
    "*.yahoo.com", "*.yahoo.jp", "*.yahooapis.jp", "*.aol.com", "search.twitter.com", "twitter.com", "*.twitter.com",
    "ajax.googleapis.com", "*.googleapis.com",
)

_CSP_NOTE = "\n    Needs manual testing. please refer to it. https://t.co/lElLxtainw?amp=1"

Values = dict[str, list[str]]


def check_csp(policy: str) -> str:
    """Return the bypassable domains found in a CSP policy, or an empty string."""
    found = [domain for domain in _CSP_DOMAINS if domain in policy]
    if not found:
        return ""
    return " ".join(found) + _CSP_NOTE


def check_vstatus(vstatus: Mapping[str, bool]) -> bool:
    """Return True when every parameter is verified and the mining probe is absent."""
    return all(key != MINING_CHECK_PARAM and value for key, value in vstatus.items())


def _first(values: Values, name: str) -> str:
    return (values.get(name) or [""])[0]


def set_param(params: Values, data_params: Values, name: str, options: Options) -> tuple[Values, Values]:
    """Add name with an empty value where it has none; to data_params only with body data."""
    if not _first(params, name):
        params[name] = [""]
    if options.data and not _first(data_params, name):
        data_params[name] = [""]
    return params, data_params


def parse_url(target: str) -> tuple[SplitResult, Values, Values]:
    """Split target into its URL parts, query parameters and empty body parameters.

    Raises ValueError when the target is not a valid URL.
    """
    if target.startswith(":"):
        raise ValueError(f"missing protocol scheme: {target!r}")
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in target):
        raise ValueError(f"invalid control character in URL: {target!r}")
    parts = urlsplit(target)
    params = parse_qs(parts.query, keep_blank_values=True)
    return parts, params, {}


def add_params_from_wordlist(
    params: Values, data_params: Values, wordlist: Iterable[str], options: Options
) -> tuple[Values, Values]:
    """Add every non-empty word as a parameter to test."""
    for word in wordlist:
        if word:
            set_param(params, data_params, word, options)
    return params, data_params


def get_ptype(value: str) -> str:
    """Return the parameter type suffix named in value."""
    if "PTYPE: URL" in value:
        return "-URL"
    if "PTYPE: FORM" in value:
        return "-FORM"
    return ""