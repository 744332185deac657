class GarblingError(Exception):
    """Base class for every failure raised by the garbling core"""


class RandomnessUnavailable(GarblingError):
    """The OS entropy source could not supply bytes. Not retried."""


class KeySetupError(GarblingError, ValueError):
    """A key of the wrong type or length was handed to the cipher"""


class AuthenticationFailed(GarblingError):
    """A ciphertext did not authenticate under the given key"""


class EvaluationFailed(GarblingError):
    """No table entry of a gate authenticated under the presented labels"""
