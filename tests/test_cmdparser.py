import getopt

import pytest

from kitbag.cmdparser import CommandParser, ParsedCommand


def test_option_then_argument():
    parsed = CommandParser("c:s:").parse(["-c", "host", "6667"])
    assert parsed == ParsedCommand([("c", "host")], ["6667"])


def test_argument_before_option_is_collected():
    parsed = CommandParser("c:s:").parse(["6667", "-s", "80"])
    assert parsed.options == [("s", "80")]
    assert parsed.args == ["6667"]


def test_value_returns_last_occurrence():
    parsed = CommandParser("c:s:").parse(["-c", "one", "-c", "two"])
    assert parsed.value("c") == "two"
    assert parsed.value("s", "none") == "none"


def test_unknown_option_raises():
    with pytest.raises(getopt.GetoptError):
        CommandParser("c:s:").parse(["-x"])


def test_missing_option_argument_raises():
    with pytest.raises(getopt.GetoptError):
        CommandParser("c:s:").parse(["-s"])


def test_no_arguments():
    parsed = CommandParser("c:s:").parse([])
    assert parsed.options == [] and parsed.args == []