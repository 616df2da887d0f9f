# dalfox

Python building blocks for an XSS scanner: the scan options model, a
colour-aware logger, proof-of-concept formatting, report tables,
reflection and DOM verification, CSP hints, parameter-mining helpers,
a per-key rate limiter and a hook for running a shell command on a
finding.

## Installation

```
pip install .
```

Run the tests with:

```
pip install .[test]
pytest
```

## Usage

### Building scan options

```python
from dalfox.lib import LibOptions, Target, initialize

opts = LibOptions(timeout=5, concurrence=10, user_agent="Example-UA")
target = Target(url="https://example.com/?q=1", method="GET", options=opts)
options = initialize(target, opts)
print(options.timeout, options.concurrence, options.format)  # 5 10 plain
```

`initialize` returns a `dalfox.model.Options` that starts from library
defaults (library mode, silent, no colour, no spinner, mining and DOM
mining on, 100 workers, 10 s timeout, method `GET`, headless on,
sequence -1) and overlays every value set in `LibOptions`. Lists such as
`uniq_param`, `header` and `ignore_params` are appended; empty strings,
zero numbers and `False` flags keep the defaults, except that
`use_headless=False` turns headless off.

`dalfox.lib.LibResult.is_found()` reports whether a result holds any PoC.

### Checking reflections

```python
from dalfox.verification import verify_reflection_with_line, verify_dom
from dalfox.codeview import code_view, check_to_show_poc

verify_reflection_with_line("a\ndalfox\nb", "dalfox")   # (True, 2)
verify_dom('<div class="dalfox">x</div>')                # True
code_view("one\ntwo Dalfox\n", "Dalfox")                # "2 line:  two Dalfox"
check_to_show_poc("r,v")                                # (False, True, True)
```

### Proof-of-concept strings

```python
from dalfox.poc import HttpRequest, make_poc, dump_request
from dalfox.model import Options

req = HttpRequest(method="POST", url="http://example.com", body="a=1")
make_poc("http://example.com", req, Options(poc_type="curl"))
# 'curl -i -k -X POST http://example.com -d "a=1"'
```

`poc_type` may be `curl`, `httpie`, `http-request` (the raw request from
`dump_request`) or anything else for the plain form.
`dalfox.poc.log_poc` logs a finding, attaches the raw request and
response to the `PoC` when `output_request` / `output_response` are set,
and prints the PoC as text or JSON.

### Logging and reports

`dalfox.logger.dal_log(level, text, options)` formats a message for its
level (`DEBUG`, `INFO`, `WEAK`, `VULN`, `SYSTEM`, `SYSTEM-M`, `GREP`,
`CODE`, `ERROR`, `YELLOW`, `PRINT`). In library mode
(`options.is_library`) messages are collected in
`options.scan_result.logs`; otherwise `PRINT` lines go to stdout and the
rest to stderr unless `options.silence` is set. When `options.output_file`
is set, `PRINT` lines are appended to it, and other lines too when
`debug` or `output_all` is on. Colours come from `options.colorizer`
(`dalfox.model.Colorizer`). `summary`, `banner` and `scan_summary` print
the settings, the banner and the end-of-scan line.

`dalfox.report.generate_report(result, options)` prints start, end and
duration followed by parameter and PoC tables for a `dalfox.model.Result`.

### Other helpers

- `dalfox.analysis.check_csp(policy)` lists CSP-allowed domains known to
  host bypass gadgets; `parse_url`, `set_param`,
  `add_params_from_wordlist` and `get_ptype` help build the set of
  parameters to test; `check_vstatus` checks verification status.
- `dalfox.utils.make_target_slice(urls)` groups URLs by host name;
  `is_allow_type`, `contains_from_array`, `duplicated_result`,
  `generate_random_token` and `format_duration` are small helpers.
- `dalfox.ratelimit.RateLimiter(delay)` spaces out operations per key.
- `dalfox.foundaction.found_action(options, target, query, ptype)` runs
  the `found_action` command through `found_action_shell -c`, replacing
  `@@query@@`, `@@target@@` and `@@type@@`, and returns whether it
  succeeded.

## What this package does not do

It sends no HTTP requests and drives no browser: there is no scanning
engine, payload list, headless verification or command-line program.
It provides the models, formatting, checks and helpers such a scanner
is built from.