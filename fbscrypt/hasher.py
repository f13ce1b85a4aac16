"""
hasher.py - Modified scrypt password hashing.

Responsibilities:
- Derive a 32-byte key from password + (salt || salt separator) with scrypt
- Encrypt the signer key with AES-256-CTR under that key (all-zero counter)
- Encode the ciphertext as the base64 password hash
- Verify a password against a stored hash

Design notes:
- The output is deterministic: same password, salt and config always give
  the same hash. The zero counter is part of the scheme; the signer key is
  a constant and only the derived key varies per user.
- encode() raises; verify() turns every FbScryptError into False so a wrong
  password and a corrupt stored hash look the same to the caller.
"""

from __future__ import annotations

import base64
import hmac
import logging

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

from .config import KEY_LEN, P, ScryptConfig, b64decode_strict
from .errors import CipherInitError, ConfigError, DerivationError, FbScryptError

logger = logging.getLogger(__name__)

BLOCK_SIZE = 16  # AES block, bytes
ZERO_COUNTER = bytes(BLOCK_SIZE)


def derive_key(password: str, salt: bytes, config: ScryptConfig) -> bytes:
    """Scrypt over password with salt || salt_separator. Raises DerivationError."""
    secret = _utf8(password)
    try:
        kdf = Scrypt(
            salt=salt + config.salt_separator,
            length=KEY_LEN,
            n=1 << config.mem_cost,
            r=config.rounds,
            p=P,
        )
        return kdf.derive(secret)
    except (ValueError, OverflowError, MemoryError) as e:
        raise DerivationError(
            f"scrypt rejected rounds={config.rounds} mem_cost={config.mem_cost}: {e}"
        ) from e


def encrypt_signer_key(key: bytes, signer_key: bytes) -> bytes:
    """AES-CTR encrypt signer_key from a zero counter block."""
    try:
        cipher = Cipher(algorithms.AES(key), modes.CTR(ZERO_COUNTER))
    except ValueError as e:
        raise CipherInitError(f"invalid AES key length {len(key)}") from e
    encryptor = cipher.encryptor()
    return encryptor.update(signer_key) + encryptor.finalize()


def encode(password: str, salt: str, config: ScryptConfig) -> str:
    """Return the base64 hash of password for the base64 salt."""
    if not config.is_valid:
        raise ConfigError("config error")

    raw_salt = b64decode_strict(salt)
    key = derive_key(password, raw_salt, config)
    cipher_text = encrypt_signer_key(key, config.signer_key)
    return base64.b64encode(cipher_text).decode("ascii")


def verify(password: str, password_hash: str, salt: str, config: ScryptConfig) -> bool:
    """True iff password hashes to password_hash. Any failure gives False."""
    try:
        computed = encode(password, salt, config)
    except FbScryptError as e:
        logger.debug("verify rejected: %s", type(e).__name__)
        return False
    return hmac.compare_digest(_utf8(computed), _utf8(password_hash))


def _utf8(value: str) -> bytes:
    # lone surrogates pass through as raw code units instead of raising
    return value.encode("utf-8", errors="surrogatepass")
