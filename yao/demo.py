import logging
import sys
from typing import List, Optional, Sequence, Tuple

from .circuits.basic_gates import TABLE_SIZE, GateType, truth
from .config import LOGGING_CONFIG
from .exceptions import EvaluationFailed, GarblingError
from .protocol.evaluator import evaluate
from .protocol.garbler import garble
from .utils.conversion import index_bits
from .utils.labels import new_wire

logger = logging.getLogger(__name__)

Row = Tuple[int, int, int]


def run_gate(gate_type: GateType) -> List[Row]:
    """Garble one gate, evaluate every input combination and check it"""
    in1, in2, out = new_wire(), new_wire(), new_wire()
    gate = garble(gate_type, in1, in2, out)

    rows = []
    for i in range(TABLE_SIZE):
        in1_bit, in2_bit = index_bits(i)
        result = evaluate(gate, in1.label_for(in1_bit), in2.label_for(in2_bit))
        expected = truth(gate_type, in1_bit, in2_bit)
        if result != out.label_for(expected):
            raise EvaluationFailed(
                f"Failed to evaluate {gate.gate_type.value} gate for input combination {i}"
            )
        rows.append((in1_bit, in2_bit, expected))
    return rows


def format_truth_table(rows: Sequence[Row]) -> str:
    lines = ["in1 in2 out", "--- --- ---"]
    for in1_bit, in2_bit, out_bit in rows:
        lines.append(f" {in1_bit}   {in2_bit}   {out_bit}")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(level=LOGGING_CONFIG["level"], format=LOGGING_CONFIG["format"])

    names = list(sys.argv[1:] if argv is None else argv)
    try:
        gate_types = [GateType(name.upper()) for name in names] or list(GateType)
    except ValueError as exc:
        print(f"Unknown gate type: {exc}", file=sys.stderr)
        print("Usage: python -m yao.demo [AND|OR|XOR ...]", file=sys.stderr)
        return 2

    for gate_type in gate_types:
        try:
            rows = run_gate(gate_type)
        except GarblingError as exc:
            print(f"Error: {gate_type.value} gate demonstration aborted: {exc}", file=sys.stderr)
            return 1
        print(f"\nTesting {gate_type.value} gate:")
        print(format_truth_table(rows))
    return 0


if __name__ == "__main__":
    sys.exit(main())
