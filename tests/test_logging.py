"""Tests for ppcalc.logging and ppcalc.settings."""

import logging

import pytest

from ppcalc.logging import Ansi
from ppcalc.logging import log
from ppcalc.settings import read_bool


def test_ansi_repr():
    assert repr(Ansi.LRED) == "\x1b[91m"
    assert repr(Ansi.RESET) == "\x1b[0m"


@pytest.mark.parametrize(
    ("color", "level"),
    [
        (None, logging.INFO),
        (Ansi.LGREEN, logging.INFO),
        (Ansi.LYELLOW, logging.WARNING),
        (Ansi.LRED, logging.ERROR),
        (Ansi.GRAY, logging.DEBUG),
    ],
)
def test_log_level_from_color(caplog, color, level):
    with caplog.at_level(logging.DEBUG, logger="ppcalc"):
        log("calculated", color)

    assert len(caplog.records) == 1
    assert caplog.records[0].levelno == level
    assert "calculated" in caplog.records[0].getMessage()


@pytest.mark.parametrize(
    ("value", "expected"),
    [("true", True), ("1", True), ("YES", True), ("false", False), ("0", False)],
)
def test_read_bool(value, expected):
    assert read_bool(value) is expected
