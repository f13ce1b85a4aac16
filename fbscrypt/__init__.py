"""
fbscrypt - Firebase-compatible modified scrypt password hashing.

The module-level encode()/verify() use a process-wide default configuration
that starts out empty. Until set_default() is called they fail the config
check (encode raises ConfigError, verify returns False). Passing a
ScryptConfig explicitly is preferred.

DEFAULT is only the initial empty value; it is not updated by set_default().
Use get_default() to read the configuration currently in effect.
"""

from __future__ import annotations

from typing import Optional

from . import hasher
from .config import KEY_LEN, P, ScryptConfig
from .errors import (
    CipherInitError,
    ConfigError,
    DecodingError,
    DerivationError,
    FbScryptError,
)

__all__ = [
    "KEY_LEN",
    "P",
    "ScryptConfig",
    "FbScryptError",
    "ConfigError",
    "DecodingError",
    "DerivationError",
    "CipherInitError",
    "DEFAULT",
    "get_default",
    "set_default",
    "encode",
    "verify",
]

DEFAULT = ScryptConfig()
_default = DEFAULT


def get_default() -> ScryptConfig:
    return _default


def set_default(config: ScryptConfig) -> None:
    """Replace the configuration used when encode/verify get no config."""
    global _default
    _default = config


def encode(password: str, salt: str, config: Optional[ScryptConfig] = None) -> str:
    return hasher.encode(password, salt, config if config is not None else _default)


def verify(
    password: str,
    password_hash: str,
    salt: str,
    config: Optional[ScryptConfig] = None,
) -> bool:
    return hasher.verify(password, password_hash, salt, config if config is not None else _default)
