"""
errors.py - Error types raised by the hash engine.

Every failure raised by encode() derives from FbScryptError, so verify()
can reject on any of them without catching unrelated exceptions.
"""

from __future__ import annotations


class FbScryptError(Exception):
    """Base class for fbscrypt failures."""


class ConfigError(FbScryptError):
    """Signer key or salt separator missing, or unusable config values."""


class DecodingError(FbScryptError, ValueError):
    """Input was not valid standard base64."""


class DerivationError(FbScryptError):
    """Scrypt rejected the cost parameters or ran out of memory."""


class CipherInitError(FbScryptError):
    """AES could not be keyed with the derived key."""
