import os

import pytest

from kitbag.largest import LargestFiles, M, format_size, list_dir, main, walk


def test_keeps_largest_descending():
    largest = LargestFiles(3)
    for name, size in [("a", 5), ("b", 50), ("c", 20), ("d", 1), ("e", 40)]:
        largest.add(name, size)
    assert largest.entries == [("b", 50), ("e", 40), ("c", 20)]


def test_zero_size_is_never_kept():
    largest = LargestFiles(3)
    assert largest.add("z", 0) is False
    assert largest.entries == []


def test_equal_sizes_keep_arrival_order():
    largest = LargestFiles(3)
    largest.add("first", 10)
    largest.add("second", 10)
    assert largest.entries == [("first", 10), ("second", 10)]


def test_capacity_one_replaces_smaller():
    largest = LargestFiles(1)
    largest.add("small", 3)
    largest.add("big", 9)
    largest.add("mid", 5)
    assert largest.entries == [("big", 9)]


def test_invalid_capacity():
    with pytest.raises(ValueError):
        LargestFiles(0)


def test_empty_report():
    assert LargestFiles(2).report() == [" 0:", " 1:"]


def test_report_lists_largest_first():
    largest = LargestFiles(2)
    largest.add("x", 7)
    largest.add("y", 3 * M)
    lines = largest.report()
    assert lines[0].endswith(" y")
    assert lines[1].endswith(" x")
    assert format_size(3 * M) in lines[0]


def test_format_size_units():
    assert format_size(3 * 1024 * 1024) == "    3M"
    assert format_size(2048) == "    2K"
    small = format_size(1024)
    assert small.strip() == "1024" and small.endswith(" ")


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "a.txt").write_bytes(b"a" * 10)
    (tmp_path / "sub" / "b.bin").write_bytes(b"b" * 300)
    (tmp_path / ".hidden").write_bytes(b"h")
    (tmp_path / "..skipped").write_bytes(b"s")
    return tmp_path


def test_walk_visits_files(tree):
    seen = []
    assert walk(str(tree), lambda p: seen.append(p), lambda e: True) is True
    names = {os.path.relpath(p, tree) for p in seen}
    assert names == {"a.txt", os.path.join("sub", "b.bin"), ".hidden"}


def test_walk_stops_when_action_asks(tree):
    seen = []

    def action(path):
        seen.append(path)
        return True

    assert walk(str(tree), action, lambda e: True) is False
    assert len(seen) == 1


def test_walk_missing_top_reports_error(tmp_path):
    errors = []
    assert walk(str(tmp_path / "nope"), lambda p: False, errors.append) is False
    assert len(errors) == 1 and isinstance(errors[0], FileNotFoundError)


def test_walk_single_file(tree):
    seen = []
    target = str(tree / "a.txt")
    walk(target, seen.append, lambda e: True)
    assert seen == [target]


def test_list_dir_kinds(tree):
    result = set(list_dir(str(tree)))
    assert ("D", os.path.join(str(tree), "sub")) in result
    assert ("R", os.path.join(str(tree), "a.txt")) in result


def test_main_prints_largest_first(tree, capsys):
    assert main([str(tree)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].endswith(os.path.join("sub", "b.bin"))
    assert len(lines) == 10


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out