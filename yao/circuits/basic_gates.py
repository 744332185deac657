from enum import Enum
from typing import Callable, Dict, Tuple

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from ..config import LABEL_CONFIG

LABEL_LENGTH = LABEL_CONFIG["label_length"]
TABLE_SIZE = 4


class GateType(Enum):
    AND = "AND"
    OR = "OR"
    XOR = "XOR"


_TRUTH: Dict[GateType, Callable[[int, int], int]] = {
    GateType.AND: lambda a, b: a & b,
    GateType.OR: lambda a, b: a | b,
    GateType.XOR: lambda a, b: a ^ b,
}


def truth(gate_type: GateType, in1_bit: int, in2_bit: int) -> int:
    """Plaintext semantics of a gate"""
    for bit in (in1_bit, in2_bit):
        if bit not in (0, 1):
            raise ValueError(f"Gate inputs must be 0 or 1, got {bit!r}")
    return _TRUTH[GateType(gate_type)](int(in1_bit), int(in2_bit))


class Wire(BaseModel):
    """
    The two secret labels of a wire. Which label stands for which bit is
    known only to whoever holds the Wire object.
    """
    model_config = ConfigDict(frozen=True, strict=True)

    label_0: bytes
    label_1: bytes

    @field_validator("label_0", "label_1")
    @classmethod
    def _check_length(cls, label: bytes) -> bytes:
        if len(label) != LABEL_LENGTH:
            raise ValueError(f"Labels must be {LABEL_LENGTH} bytes, got {len(label)}")
        return label

    @model_validator(mode="after")
    def _check_distinct(self) -> "Wire":
        if self.label_0 == self.label_1:
            raise ValueError("Wire labels for 0 and 1 must differ")
        return self

    def label_for(self, bit: int) -> bytes:
        if bit not in (0, 1):
            raise ValueError(f"Wire bit must be 0 or 1, got {bit!r}")
        return self.label_1 if bit else self.label_0

    def decode(self, label: bytes) -> int:
        """Map a label back to the bit it encodes"""
        if label == self.label_0:
            return 0
        if label == self.label_1:
            return 1
        raise ValueError("Label does not belong to this wire")


class Gate(BaseModel):
    """
    A garbled two-input gate. table[i] encrypts the output label for
    in1_bit = i >> 1 and in2_bit = i & 1. Rows are never permuted.
    """
    model_config = ConfigDict(frozen=True, strict=True)

    gate_type: GateType
    table: Tuple[bytes, bytes, bytes, bytes]

    def __len__(self) -> int:
        return len(self.table)
