from typing import Tuple


def xor_bytes(a: bytes, b: bytes) -> bytes:
    """Byte-wise XOR of two equal-length byte strings"""
    if len(a) != len(b):
        raise ValueError(f"Cannot XOR {len(a)} bytes with {len(b)} bytes")
    return bytes(x ^ y for x, y in zip(a, b))


def index_bits(index: int) -> Tuple[int, int]:
    """Split a garbled table index into (in1_bit, in2_bit)"""
    if not 0 <= index < 4:
        raise ValueError(f"Table index out of range: {index}")
    return (index >> 1) & 1, index & 1


def bits_index(in1_bit: int, in2_bit: int) -> int:
    """Inverse of index_bits"""
    return (in1_bit << 1) | in2_bit
