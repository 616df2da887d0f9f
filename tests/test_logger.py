from datetime import datetime, timedelta

from dalfox import logger
from dalfox.logger import (
    VERSION,
    banner,
    bool_to_color_str,
    dal_log,
    draw_spinner,
    restart_spinner,
    scan_summary,
    set_spinner,
    stop_spinner,
    summary,
)
from dalfox.model import Colorizer, Options, PoC, Result


class FakeSpinner:
    def __init__(self):
        self.suffix = ""
        self.events = []

    def restart(self):
        self.events.append("restart")

    def stop(self):
        self.events.append("stop")


def library_options(**kwargs):
    defaults = dict(is_library=True, colorizer=Colorizer(enabled=False))
    defaults.update(kwargs)
    return Options(**defaults)


def test_bool_to_color_str_false_plain():
    assert bool_to_color_str(False, Options(colorizer=Colorizer(False))) == "false"


def test_bool_to_color_str_true_colored():
    colorizer = Colorizer(True)
    assert bool_to_color_str(True, Options(colorizer=colorizer)) == colorizer.bright_green("true")


def test_bool_to_color_str_without_colorizer():
    assert bool_to_color_str(True, Options()) == "true"


def test_set_spinner_updates_suffix():
    spinner = FakeSpinner()
    set_spinner("hello", Options(spinner=spinner))
    assert spinner.suffix == "  hello"


def test_spinner_stop_and_restart():
    spinner = FakeSpinner()
    options = Options(spinner=spinner)
    stop_spinner(options)
    restart_spinner(options)
    assert spinner.events == ["stop", "restart"]


def test_spinner_functions_without_spinner():
    options = Options()
    set_spinner("x", options)
    stop_spinner(options)
    restart_spinner(options)
    assert options.spinner is None


def test_draw_spinner():
    spinner = FakeSpinner()
    draw_spinner(spinner, {"a": 1}, 1)
    assert spinner.suffix == "  Running..."


def test_summary_silence_prints_nothing(capsys):
    summary(Options(silence=True), "")
    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out == ""


def test_summary_no_silence(capsys):
    options = Options(
        method="GET",
        start_time=datetime(2024, 1, 2, 3, 4, 5),
        blind_url="https://callback.example.com",
        server_host="0.0.0.0",
        server_port=6664,
    )
    summary(options, "REST API Mode")
    err = capsys.readouterr().err
    assert "Target                 REST API Mode" in err
    assert "Listen Address         0.0.0.0:6664" in err
    assert "Gf-Patterns" in err
    assert "https://callback.example.com" in err
    assert "2024-01-02 03:04:05" in err


def test_summary_mining_wordlist(capsys):
    summary(Options(mining=True, finding_dom=True, mining_wordlist="words.txt"), "t")
    err = capsys.readouterr().err
    assert "true (words.txt, DOM Mining Enabled)" in err
    assert "Listen Address" not in err


def test_dal_log_debug_enabled():
    options = library_options(debug=True)
    dal_log("DEBUG", "msg", options)
    assert options.scan_result.logs == ["[DEBUG] msg"]


def test_dal_log_debug_disabled():
    options = library_options()
    dal_log("DEBUG", "msg", options)
    assert options.scan_result.logs == []


def test_dal_log_prefixes():
    options = library_options(no_spinner=True)
    for level in ("INFO", "WEAK", "VULN", "GREP", "ERROR", "SYSTEM", "SYSTEM-M", "CODE", "YELLOW"):
        dal_log(level, "m", options)
    assert options.scan_result.logs == [
        "[I] m", "[W] m", "[V] m", "[G] m", "[E] m", "[*] m", "[*] m", "    m", "m",
    ]


def test_dal_log_colored_info():
    colorizer = Colorizer(True)
    options = Options(is_library=True, colorizer=colorizer)
    dal_log("INFO", "m", options)
    assert options.scan_result.logs == [colorizer.bright_blue("[I] ") + "m"]


def test_dal_log_code_empty_is_dropped():
    options = library_options()
    dal_log("CODE", "", options)
    assert options.scan_result.logs == []


def test_dal_log_system_with_spinner_hides_message():
    spinner = FakeSpinner()
    options = library_options(spinner=spinner)
    dal_log("SYSTEM", "working", options)
    assert spinner.suffix == "  working"
    assert options.scan_result.logs == ["HIDDENMESSAGE!!"]


def test_dal_log_system_m_multicast_prints(capsys):
    spinner = FakeSpinner()
    options = library_options(silence=True, multicast_mode=True, spinner=spinner)
    dal_log("SYSTEM-M", "multi", options)
    assert capsys.readouterr().err == "[*] multi\n"
    assert spinner.events == ["stop", "restart"]


def test_dal_log_console_output(capsys):
    options = Options(colorizer=Colorizer(False))
    dal_log("INFO", "hi", options)
    assert capsys.readouterr().err == "\r[I] hi\n"


def test_dal_log_silent_console(capsys):
    options = Options(silence=True, colorizer=Colorizer(False))
    dal_log("INFO", "hi", options)
    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out == ""


def test_dal_log_print_plain(capsys):
    options = Options(silence=True, colorizer=Colorizer(False))
    dal_log("PRINT", "poc", options)
    assert capsys.readouterr().out == "[POC]poc\n"


def test_dal_log_print_json_writes_file(capsys, tmp_path):
    path = tmp_path / "out.txt"
    options = Options(silence=True, format="json", output_file=str(path))
    dal_log("PRINT", '{"a":1}', options)
    assert capsys.readouterr().out == '{"a":1}\n'
    assert path.read_text(encoding="utf-8") == '{"a":1}\n'


def test_dal_log_output_all_writes_file(tmp_path):
    path = tmp_path / "out.txt"
    options = library_options(output_all=True, output_file=str(path))
    dal_log("VULN", "found", options)
    dal_log("INFO", "note", options)
    assert path.read_text(encoding="utf-8") == "[V] found\n[I] note\n"


def test_dal_log_without_output_all_skips_file(tmp_path):
    path = tmp_path / "out.txt"
    options = library_options(output_file=str(path))
    dal_log("INFO", "note", options)
    assert not path.exists()


def test_dal_log_bad_output_file(capsys, tmp_path):
    bad = tmp_path / "missing" / "out.txt"
    options = Options(silence=True, debug=True, output_file=str(bad))
    dal_log("INFO", "x", options)
    assert "output file error (file)" in capsys.readouterr().err


def test_banner_contains_version():
    options = library_options()
    banner(options)
    assert len(options.scan_result.logs) == 1
    assert "Dalfox " + VERSION in options.scan_result.logs[0]
    assert VERSION == "v2.10.0"


def test_scan_summary():
    options = library_options()
    result = Result(pocs=[PoC(type="V")], duration=timedelta(hours=1))
    scan_summary(result, options)
    assert options.scan_result.logs[-1] == "[*] [duration: 1h0m0s][issues: 1] Finish Scan!"
    assert set(options.scan_result.logs[0][4:]) == {"-"}


def test_module_exposes_version():
    assert logger.VERSION.startswith("v2.")