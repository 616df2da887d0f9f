from dalfox.model import Colorizer, Issue, Options, PoC, Result


def test_colorizer_disabled_returns_plain_text():
    c = Colorizer(False)
    for method in (c.bright_green, c.bright_red, c.bright_yellow, c.bright_blue,
                   c.bright_magenta, c.green, c.yellow, c.white):
        assert method("false") == "false"
    assert c.gray(15, "code") == "code"


def test_colorizer_enabled_bright_green():
    assert Colorizer(True).bright_green("true") == "\x1b[92mtrue\x1b[0m"


def test_colorizer_enabled_wraps_text():
    c = Colorizer()
    for method in (c.bright_red, c.bright_blue, c.green, c.yellow, c.white):
        out = method("abc")
        assert out.startswith("\x1b[")
        assert out.endswith("\x1b[0m")
        assert "abc" in out
        assert out != "abc"
    assert "38;5;" in c.gray(15, "x")


def test_poc_to_dict_omits_empty_optional_fields():
    poc = PoC(type="V", method="GET", data="payload")
    d = poc.to_dict()
    assert set(d) == {"type", "inject_type", "poc_type", "method", "data", "param",
                      "payload", "evidence", "cwe", "severity"}
    assert d["type"] == "V"
    assert d["method"] == "GET"


def test_poc_to_dict_includes_set_optional_fields():
    poc = PoC(message_id=7, raw_request="req", raw_response="res", message_str="m")
    d = poc.to_dict()
    assert d["message_id"] == 7
    assert d["raw_request"] == "req"
    assert d["raw_response"] == "res"
    assert d["message_str"] == "m"


def test_options_mutable_defaults_are_independent():
    a = Options()
    b = Options()
    a.header.append("X: 1")
    a.scan_result.logs.append("line")
    assert b.header == []
    assert b.scan_result.logs == []


def test_result_defaults_empty():
    r = Result()
    assert r.pocs == []
    assert r.params == []
    assert r.duration.total_seconds() == 0


def test_issue_holds_its_own_poc():
    a = Issue()
    b = Issue()
    a.poc.type = "V"
    assert b.poc.type == ""