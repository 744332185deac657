import pytest

from yao import demo
from yao.circuits.basic_gates import GateType
from yao.exceptions import EvaluationFailed


@pytest.mark.parametrize("gate_type, outputs", [
    (GateType.AND, [0, 0, 0, 1]),
    (GateType.OR, [0, 1, 1, 1]),
    (GateType.XOR, [0, 1, 1, 0]),
])
def test_run_gate(gate_type, outputs):
    rows = demo.run_gate(gate_type)
    assert [(a, b) for a, b, _ in rows] == [(0, 0), (0, 1), (1, 0), (1, 1)]
    assert [out for _, _, out in rows] == outputs


def test_format_truth_table():
    table = demo.format_truth_table([(0, 0, 0), (0, 1, 1), (1, 0, 1), (1, 1, 0)])
    assert table.splitlines() == [
        "in1 in2 out",
        "--- --- ---",
        " 0   0   0",
        " 0   1   1",
        " 1   0   1",
        " 1   1   0",
    ]


def test_main_all_gates(capsys):
    assert demo.main([]) == 0
    stdout = capsys.readouterr().out
    for name in ("AND", "OR", "XOR"):
        assert f"Testing {name} gate:" in stdout


def test_main_selected_gate(capsys):
    assert demo.main(["xor"]) == 0
    stdout = capsys.readouterr().out
    assert "Testing XOR gate:" in stdout
    assert "Testing AND gate:" not in stdout


def test_main_unknown_gate(capsys):
    assert demo.main(["NAND"]) == 2
    assert "Unknown gate type" in capsys.readouterr().err


def test_main_aborts_on_evaluation_failure(monkeypatch, capsys):
    def broken(gate, l1, l2):
        raise EvaluationFailed("No matching table entry")

    monkeypatch.setattr(demo, "evaluate", broken)
    assert demo.main(["AND"]) == 1
    captured = capsys.readouterr()
    assert "aborted" in captured.err
    assert "Testing AND gate:" not in captured.out


def test_run_gate_detects_wrong_label(monkeypatch):
    """A label that authenticates but is not the expected one is still an error"""
    monkeypatch.setattr(demo, "evaluate", lambda gate, l1, l2: b"\x00" * 16)
    with pytest.raises(EvaluationFailed):
        demo.run_gate(GateType.OR)
