import logging

from ..circuits.basic_gates import Gate
from ..exceptions import EvaluationFailed
from ..utils.conversion import xor_bytes
from ..utils.crypto import try_decrypt

logger = logging.getLogger(__name__)


def evaluate(gate: Gate, l1: bytes, l2: bytes) -> bytes:
    """
    Recover the output label of a garbled gate from one label per input wire.

    The evaluator cannot tell which row its labels open, so every row is
    tried in index order and the first one that authenticates wins.
    """
    key = xor_bytes(l1, l2)
    for i, entry in enumerate(gate.table):
        label = try_decrypt(key, entry)
        if label is not None:
            logger.debug("%s gate opened at row %d", gate.gate_type.value, i)
            return label

    logger.error("No row of the %s gate authenticated", gate.gate_type.value)
    raise EvaluationFailed(f"No matching table entry in {gate.gate_type.value} gate")
