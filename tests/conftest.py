import time

import pytest

DEB_DOCUMENT = """\
project: foo
maintainer: A <a@example.com>
changelog:
  - version: "1.0"
    urgency: low
    stable: true
    date: "2024-01-05 10:00:00 +0000"
    changes:
      - desc: fix bug
        closes: [42]
"""


def set_timezone(monkeypatch, tz: str):
    monkeypatch.setenv("TZ", tz)
    time.tzset()


@pytest.fixture(autouse=True)
def utc(monkeypatch):
    set_timezone(monkeypatch, "UTC")
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def document_text():
    return DEB_DOCUMENT
