import logging
import secrets
from typing import Optional

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from ..config import CIPHER_CONFIG
from ..exceptions import AuthenticationFailed, KeySetupError, RandomnessUnavailable

logger = logging.getLogger(__name__)

KEY_LENGTH = CIPHER_CONFIG["key_length"]
NONCE_SIZE = CIPHER_CONFIG["nonce_size"]
TAG_SIZE = CIPHER_CONFIG["tag_size"]


def random_bytes(size: int) -> bytes:
    """Draw size bytes from the OS CSPRNG"""
    try:
        return secrets.token_bytes(size)
    except (OSError, NotImplementedError) as exc:
        logger.error("Entropy source failed while drawing %d bytes", size)
        raise RandomnessUnavailable("Cannot read from the OS entropy source") from exc


def _cipher(key: bytes) -> AESGCM:
    if not isinstance(key, bytes):
        raise KeySetupError(f"Key must be bytes, got {type(key).__name__}")
    if len(key) != KEY_LENGTH:
        raise KeySetupError(f"Key must be {KEY_LENGTH} bytes, got {len(key)}")
    return AESGCM(key)


def encrypt(key: bytes, plaintext: bytes) -> bytes:
    """
    AES-GCM encrypt under a fresh nonce.

    Returns nonce || ciphertext || tag.
    """
    aesgcm = _cipher(key)
    nonce = random_bytes(NONCE_SIZE)
    return nonce + aesgcm.encrypt(nonce, plaintext, None)


def decrypt(key: bytes, ciphertext: bytes) -> bytes:
    """
    Inverse of encrypt. Raises AuthenticationFailed if the tag does not
    verify under key, which is what a wrong key looks like.
    """
    aesgcm = _cipher(key)
    if len(ciphertext) < NONCE_SIZE + TAG_SIZE:
        raise AuthenticationFailed("Ciphertext too short to hold a nonce and tag")
    nonce, body = ciphertext[:NONCE_SIZE], ciphertext[NONCE_SIZE:]
    try:
        return aesgcm.decrypt(nonce, body, None)
    except InvalidTag as exc:
        raise AuthenticationFailed("Ciphertext did not authenticate") from exc


def try_decrypt(key: bytes, ciphertext: bytes) -> Optional[bytes]:
    """Like decrypt, but returns None when authentication fails"""
    try:
        return decrypt(key, ciphertext)
    except AuthenticationFailed:
        return None
