from ..circuits.basic_gates import LABEL_LENGTH, Wire
from .crypto import random_bytes


def new_label() -> bytes:
    """Generate a fresh random wire label"""
    return random_bytes(LABEL_LENGTH)


def new_wire() -> Wire:
    """Generate a wire with two independently drawn labels"""
    return Wire(label_0=new_label(), label_1=new_label())
