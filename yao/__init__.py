from .circuits.basic_gates import LABEL_LENGTH, Gate, GateType, Wire, truth
from .exceptions import (
    AuthenticationFailed,
    EvaluationFailed,
    GarblingError,
    KeySetupError,
    RandomnessUnavailable,
)
from .protocol.evaluator import evaluate
from .protocol.garbler import garble
from .utils.labels import new_label, new_wire

__all__ = [
    "LABEL_LENGTH",
    "Gate",
    "GateType",
    "Wire",
    "truth",
    "new_label",
    "new_wire",
    "garble",
    "evaluate",
    "GarblingError",
    "RandomnessUnavailable",
    "KeySetupError",
    "AuthenticationFailed",
    "EvaluationFailed",
]
