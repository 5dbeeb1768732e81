from kitbag.chemical import RULE, add_left, add_right, incomplete_node, main, solution
from kitbag.paths import Path

A_B = Path(1, "A", "B", 5)
B_C = Path(2, "B", "C", 7)
C_A = Path(3, "C", "A", 9)
A_C = Path(4, "A", "C", 11)
NODES = ["A", "B", "C"]


def test_add_left_takes_first_path_per_source():
    assert add_left([A_B, A_C, B_C, C_A], NODES) == [A_B, B_C, C_A]


def test_add_left_stops_once_every_node_is_a_source():
    extra = Path(5, "A", "B", 1)
    assert add_left([A_B, B_C, C_A, extra], NODES) == [A_B, B_C, C_A]


def test_add_right_extends_without_mutating_target():
    target = [A_B]
    result = add_right([A_B, A_C, C_A], NODES, target)
    assert result == [A_B, A_C, C_A]
    assert target == [A_B]


def test_add_right_adds_nothing_when_all_destinations_present():
    target = [A_B, B_C, C_A]
    assert add_right([A_C], NODES, target) == target


def test_incomplete_node_for_cycle_is_none():
    assert incomplete_node([A_B, B_C, C_A], NODES) is None


def test_incomplete_node_for_chain():
    assert incomplete_node([A_B, B_C], NODES) == "B"


def test_solution_invariants():
    chosen, total, missing = solution([A_B, B_C, C_A, A_C], NODES)
    assert chosen == [A_B, B_C, C_A]
    assert total == sum(p.weight for p in chosen)
    assert missing is None


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out


def test_main_generates(capsys):
    assert main(["-G", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("M1\tC1\tC2\t")


def test_main_solves_file(tmp_path, capsys):
    data = tmp_path / "paths.txt"
    data.write_text("M1 A B 5\nM2 B C 7\nM3 C A 9\n", encoding="utf-8")
    assert main([str(data)]) == 0
    out = capsys.readouterr().out
    assert RULE in out
    assert out.rstrip().endswith("OK")


def test_main_reports_incomplete(tmp_path, capsys):
    data = tmp_path / "paths.txt"
    data.write_text("M1 A B 5\nM2 B C 7\n", encoding="utf-8")
    assert main([str(data)]) == 0
    assert "is not complete" in capsys.readouterr().out


def test_main_reports_format_error_and_continues(tmp_path, capsys):
    data = tmp_path / "paths.txt"
    data.write_text("M1 A B 5\nX0 B C 1\n", encoding="utf-8")
    assert main([str(data)]) == 0
    captured = capsys.readouterr()
    assert "format" in captured.err
    assert RULE in captured.out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "cannot open" in capsys.readouterr().err