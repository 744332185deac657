import os

from dotenv import load_dotenv

load_dotenv()

LABEL_CONFIG = {
    "label_length": 16,  # bytes, 128-bit labels
}

CIPHER_CONFIG = {
    "algorithm": "AES-128-GCM",
    "key_length": 16,  # keys are label XORs, so must match label_length
    "nonce_size": 12,
    "tag_size": 16
}

LOGGING_CONFIG = {
    "level": os.getenv("YAO_LOG_LEVEL", "WARNING").upper(),
    "format": "%(asctime)s %(name)s %(levelname)s %(message)s"
}
