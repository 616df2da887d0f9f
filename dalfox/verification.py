"""Checks for reflected payloads and injected DOM elements."""

from __future__ import annotations

from bs4 import BeautifulSoup


def verify_reflection_with_line(body: str, payload: str) -> tuple[bool, int]:
    """Return whether payload is in body and the 1-based line it first appears on."""
    for number, line in enumerate(body.split("\n"), start=1):
        if payload in line:
            return True, number
    return False, 0


def verify_reflection(body: str, payload: str) -> bool:
    return payload in body


def verify_dom(html: str) -> bool:
    """Return True when the document has an element with class or id 'dalfox'."""
    soup = BeautifulSoup(html, "html.parser")
    return soup.find(class_="dalfox") is not None or soup.find(id="dalfox") is not None