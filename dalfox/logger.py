"""Console and file logging, spinner control, banner and scan summaries."""

from __future__ import annotations

import sys
import threading
from datetime import datetime
from typing import Any

from dalfox.model import Colorizer, Options, Result
from dalfox.utils import format_duration, generate_terminal_width_line

VERSION = "v2.10.0"

_HIDDEN = "HIDDENMESSAGE!!"
_ZERO_TIME = "0001-01-01 00:00:00"

_BANNER = (
    "                                                        \n"
    "               ░█▒               \n"
    "             ████     ▓                    \n"
    "           ▓█████  ▓██▓                  \n"
    "          ████████████         ░          \n"
    "        ░███████████▓          ▓░     \n"
    "     ░████████████████        ▒██░    \n"
    "    ▓██████████▒███████     ░█████▓░    \n"
    "   ██████████████░ ████        █▓     \n"
    " ░█████▓          ░████▒       ░         Dalfox " + VERSION + "\n"
    " █████               ▓██░             \n"
    " ████                  ▓██      Powerful open-source XSS scanner       \n"
    " ███▓        ▓███████▓▒▓█░     and utility focused on automation.       \n"
    " ███▒      █████                     \n"
    " ▓███     ██████                    \n"
    " ████     ██████▒                \n"
    " ░████    ████████▒\n"
    " "
)


def _colors(options: Options) -> Colorizer:
    return options.colorizer if options.colorizer is not None else Colorizer(enabled=False)


def bool_to_color_str(value: bool, options: Options) -> str:
    """Return 'true'/'false', coloured green or red when colours are set."""
    text = "true" if value else "false"
    if options.colorizer is None:
        return text
    return options.colorizer.bright_green(text) if value else options.colorizer.bright_red(text)


def summary(options: Options, target: str) -> None:
    """Print the scan settings to stderr unless silenced."""
    if options.silence:
        return
    color = _colors(options)
    mining_word = options.mining_wordlist or "Gf-Patterns"
    listen_addr = f"{options.server_host}:{options.server_port}"
    started = (
        options.start_time.strftime("%Y-%m-%d %H:%M:%S")
        if options.start_time is not None
        else _ZERO_TIME
    )
    dom = ", DOM Mining Enabled" if options.finding_dom else ""
    err = sys.stderr

    print(f" 🎯  Target                 {color.bright_yellow(target)}", file=err)
    if target == "REST API Mode":
        print(f" 🧲  Listen Address         {color.bright_blue(listen_addr)}", file=err)
    print(f" 🏁  Method                 {color.bright_blue(options.method)}", file=err)
    print(
        f" 🖥   Performance            {options.concurrence} worker / {options.max_cpu} cpu",
        file=err,
    )
    print(
        f" ⛏   Mining                 {bool_to_color_str(options.mining, options)} "
        f"({mining_word}{dom})",
        file=err,
    )
    if options.blind_url:
        print(f" 🛰   Blind XSS Callback     {color.bright_blue(options.blind_url)}", file=err)
    print(f" ⏱   Timeout                {options.timeout}", file=err)
    print(
        f" 📤  FollowRedirect         {bool_to_color_str(options.follow_redirect, options)}",
        file=err,
    )
    print(f" 🕰   Started at             {started}", file=err)
    print("", file=err)
    dal_log("SYSTEM-M", generate_terminal_width_line("-"), options)


def _format(level: str, text: str, options: Options) -> tuple[str, str] | None:
    """Return (display text, file text) for a level, or None to drop the message."""
    color = _colors(options)
    all_write = options.debug or options.output_all
    prefixed = {
        "INFO": ("[I] ", color.bright_blue),
        "WEAK": ("[W] ", color.yellow),
        "VULN": ("[V] ", color.bright_red),
        "GREP": ("[G] ", color.green),
        "ERROR": ("[E] ", color.yellow),
    }
    ftext = ""
    if level == "DEBUG":
        if not options.debug:
            return None
        ftext = "[DEBUG] " + text
        text = color.bright_blue("[DEBUG] ") + text
    elif level in prefixed:
        prefix, paint = prefixed[level]
        if all_write:
            ftext = prefix + text
        text = paint(prefix) + text
    elif level == "SYSTEM":
        if all_write:
            ftext = "[*] " + text
        if options.no_spinner:
            text = color.white("[*] ") + text
        elif not options.silence:
            set_spinner(text, options)
            text = _HIDDEN
    elif level == "SYSTEM-M":
        if all_write:
            ftext = "[*] " + text
        text = color.white("[*] ") + text
        if options.silence and options.multicast_mode:
            stop_spinner(options)
            print(text, file=sys.stderr)
            restart_spinner(options)
    elif level == "CODE":
        if not text:
            return None
        if all_write:
            ftext = "    " + text
        text = color.gray(15, "    " + text)
    elif level == "YELLOW":
        text = color.bright_yellow(text)
    return text, ftext


def _append_to_file(path: str, line: str) -> None:
    try:
        with open(path, "a", encoding="utf-8") as handle:
            handle.write(line + "\n")
    except OSError:
        print("output file error (file)", file=sys.stderr)
        print("output file error (write)", file=sys.stderr)


def dal_log(level: str, text: str, options: Options) -> None:
    """Format a message for a level and send it to the log, console and output file."""
    formatted = _format(level, text, options)
    if formatted is None:
        return
    text, ftext = formatted
    lock = options.lock if options.lock is not None else threading.Lock()
    with lock:
        if options.is_library:
            options.scan_result.logs.append(text)
        elif level == "PRINT":
            stop_spinner(options)
            if options.format == "json":
                ftext = text
                print(text)
            else:
                ftext = "[POC]" + text
                print(_colors(options).bright_magenta("[POC]" + text))
            restart_spinner(options)
        elif not options.silence and text != _HIDDEN:
            print("\r" + text, file=sys.stderr)

        if options.output_file and ftext:
            _append_to_file(options.output_file, ftext)


def set_spinner(text: str, options: Options) -> None:
    """Show text beside the spinner, if there is one."""
    if options.spinner is not None:
        options.spinner.suffix = "  " + text


def restart_spinner(options: Options) -> None:
    if options.spinner is not None:
        options.spinner.restart()


def stop_spinner(options: Options) -> None:
    if options.spinner is not None:
        options.spinner.stop()


def banner(options: Options) -> None:
    """Log the program banner."""
    dal_log("", _BANNER, options)


def scan_summary(scan_result: Result, options: Options) -> None:
    """Log the duration and number of issues of a finished scan."""
    dal_log("SYSTEM-M", generate_terminal_width_line("-"), options)
    dal_log(
        "SYSTEM-M",
        f"[duration: {format_duration(scan_result.duration)}]"
        f"[issues: {len(scan_result.pocs)}] Finish Scan!",
        options,
    )


def draw_spinner(spinner: Any, tasks: dict[str, int], pointer: int) -> None:
    """Set the spinner's running message."""
    spinner.suffix = "  Running..."