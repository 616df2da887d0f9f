import pytest

from dalfox.verification import verify_dom, verify_reflection, verify_reflection_with_line


@pytest.mark.parametrize("body,payload,want,line", [
    ("adff\ndalfox\n1234", "dalfox", True, 2),
    ("adff\111\n1234", "dalfox", False, 0),
])
def test_verify_reflection_with_line(body, payload, want, line):
    assert verify_reflection_with_line(body, payload) == (want, line)


@pytest.mark.parametrize("body,want", [
    ("1234dalfox1234", True),
    ("987879788", False),
])
def test_verify_reflection(body, want):
    assert verify_reflection(body, "dalfox") is want


@pytest.mark.parametrize("html,want", [
    ('<div class="dalfox">ab</div>', True),
    ("<div id=dalfox>ab</div>", True),
    ("<div>dalfox</div>", False),
])
def test_verify_dom(html, want):
    assert verify_dom(html) is want