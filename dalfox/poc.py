"""Building and logging proofs of concept."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from urllib.parse import urlsplit

from dalfox.logger import VERSION, dal_log
from dalfox.model import Options, PoC

DEFAULT_USER_AGENT = f"Dalfox/{VERSION}"


@dataclass
class HttpRequest:
    """An outgoing HTTP request; body is None when the request has none."""

    method: str = "GET"
    url: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    body: str | bytes | None = None

    def body_text(self) -> str:
        if self.body is None:
            return ""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8", errors="replace")
        return self.body


def _header(headers: dict[str, str], name: str) -> str | None:
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return None


def dump_request(req: HttpRequest) -> str:
    """Return the request as it would be sent on the wire."""
    parts = urlsplit(req.url)
    target = parts.path or "/"
    if parts.query:
        target += "?" + parts.query
    host = _header(req.headers, "Host") or parts.netloc
    lines = [
        f"{req.method} {target} HTTP/1.1",
        f"Host: {host}",
        f"User-Agent: {_header(req.headers, 'User-Agent') or DEFAULT_USER_AGENT}",
    ]
    body = req.body_text()
    if req.body is not None:
        lines.append(f"Content-Length: {len(body.encode('utf-8'))}")
    skip = {"host", "user-agent", "content-length"}
    lines.extend(f"{k}: {v}" for k, v in req.headers.items() if k.lower() not in skip)
    if _header(req.headers, "Accept-Encoding") is None:
        lines.append("Accept-Encoding: gzip")
    return "\r\n".join(lines) + "\r\n\r\n" + body


def _to_json(poc: PoC) -> str:
    text = json.dumps(poc.to_dict(), ensure_ascii=False, separators=(",", ":"))
    return text.replace("<", "\\u003c").replace(">", "\\u003e").replace("&", "\\u0026")


def log_poc(
    poc: PoC,
    resbody: str,
    req: HttpRequest,
    options: Options,
    show: bool,
    level: str,
    message: str,
) -> None:
    """Log a finding, attach raw request/response when asked, and print the PoC."""
    dal_log(level, message, options)
    dal_log("CODE", poc.evidence, options)
    if options.output_request:
        dump = dump_request(req)
        poc.raw_request = dump
        dal_log("CODE", "\n" + dump, options)
    if options.output_response:
        poc.raw_response = resbody
        dal_log("CODE", resbody, options)
    if show:
        if options.format == "json":
            dal_log("PRINT", _to_json(poc) + ",", options)
        else:
            line = f"[{poc.type}][{poc.method}][{poc.inject_type}] {poc.data}"
            dal_log("PRINT", line, options)


def make_poc(poc: str, req: HttpRequest, options: Options) -> str:
    """Render a PoC in the format chosen by options.poc_type."""
    if options.poc_type == "http-request":
        return "HTTP RAW REQUEST\n" + dump_request(req)

    if req.body is not None:
        body = req.body_text()
        if not body:
            return poc
        if options.poc_type == "curl":
            return f'curl -i -k -X {req.method} {poc} -d "{body}"'
        if options.poc_type == "httpie":
            return f'http {req.method} {poc} "{body}" --verify=false -f'
        return f"{poc} -d {body}"

    if options.poc_type == "curl":
        return "curl -i -k " + poc
    if options.poc_type == "httpie":
        return f"http {poc} --verify=false"
    return poc