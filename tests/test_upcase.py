import pytest

from kitbag.upcase import main, upcase_in_threads


def test_upper_cases_in_order():
    words = ["abc", "Hello", "mixed Case 42"]
    assert upcase_in_threads(words) == [w.upper() for w in words]


def test_only_ascii_letters_change():
    assert upcase_in_threads(["straße"]) == ["STRAßE"]


def test_empty_input():
    assert upcase_in_threads([]) == []


def test_custom_stack_size():
    assert upcase_in_threads(["xy"], 1 << 20) == ["XY"]


def test_invalid_stack_size():
    with pytest.raises(ValueError):
        upcase_in_threads(["xy"], 1)


def test_main_prints_results(capsys):
    assert main(["abc", "def"]) == 0
    out = capsys.readouterr().out
    assert "returned value was ABC" in out
    assert "returned value was DEF" in out


def test_main_bad_option(capsys):
    assert main(["-q"]) == 1
    assert "Usage" in capsys.readouterr().out