import logging

from ..circuits.basic_gates import TABLE_SIZE, Gate, GateType, Wire, truth
from ..utils.conversion import index_bits, xor_bytes
from ..utils.crypto import encrypt

logger = logging.getLogger(__name__)


def garble(gate_type: GateType, in1: Wire, in2: Wire, out: Wire) -> Gate:
    """
    Build the garbled table of a two-input gate.

    Row i holds the output label for (in1_bit, in2_bit) = (i >> 1, i & 1),
    encrypted under the XOR of the two matching input labels. The XOR key
    is used as-is rather than passed through a KDF, so this is a
    demonstration-grade scheme.
    """
    gate_type = GateType(gate_type)
    table = []
    for i in range(TABLE_SIZE):
        in1_bit, in2_bit = index_bits(i)
        key = xor_bytes(in1.label_for(in1_bit), in2.label_for(in2_bit))
        label = out.label_for(truth(gate_type, in1_bit, in2_bit))
        table.append(encrypt(key, label))

    logger.debug("Garbled %s gate with %d rows", gate_type.value, len(table))
    return Gate(gate_type=gate_type, table=tuple(table))
