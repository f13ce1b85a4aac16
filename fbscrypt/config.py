"""
config.py - Hash configuration holder.

Responsibilities:
- Hold the per-deployment scrypt parameters (signer key, salt separator,
  rounds, memory cost) in an immutable object
- Decode the base64 representation the parameters are distributed in
- Load the parameters from environment variables

Design notes:
- Parallelism and derived key length are fixed by the legacy scheme, so they
  are module constants rather than fields.
- Malformed base64 passed to from_base64() degrades to empty bytes unless
  strict=True. The empty value is caught later by the configuration check
  in hasher.encode().
"""

from __future__ import annotations

import base64
import binascii
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .errors import ConfigError, DecodingError


# Scrypt parameters fixed by the scheme
P = 1
KEY_LEN = 32  # AES-256

DEFAULT_ROUNDS = 8
DEFAULT_MEM_COST = 14
ENV_PREFIX = "FBSCRYPT_"


def b64decode_strict(value: str) -> bytes:
    """
    Decode standard base64 (padding required). Line breaks are skipped,
    anything else outside the alphabet raises DecodingError.
    """
    try:
        return base64.b64decode(value.replace("\r", "").replace("\n", ""), validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodingError(f"invalid base64: {e}") from e


@dataclass(frozen=True)
class ScryptConfig:
    signer_key: bytes = field(default=b"", repr=False)
    salt_separator: bytes = field(default=b"", repr=False)
    rounds: int = 0
    mem_cost: int = 0

    @classmethod
    def from_base64(
        cls,
        signer_key: str,
        salt_separator: str,
        rounds: int,
        mem_cost: int,
        strict: bool = False,
    ) -> "ScryptConfig":
        """
        Build a config from base64 signer key / salt separator.
        With strict=False a value that fails to decode becomes b"".
        """
        return cls(
            signer_key=_decode(signer_key, strict),
            salt_separator=_decode(salt_separator, strict),
            rounds=rounds,
            mem_cost=mem_cost,
        )

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        prefix: str = ENV_PREFIX,
        strict: bool = False,
    ) -> "ScryptConfig":
        """Read <prefix>SIGNER_KEY, SALT_SEPARATOR, ROUNDS and MEM_COST."""
        env = os.environ if environ is None else environ
        return cls.from_base64(
            env.get(prefix + "SIGNER_KEY", ""),
            env.get(prefix + "SALT_SEPARATOR", ""),
            rounds=_env_int(env, prefix + "ROUNDS", DEFAULT_ROUNDS),
            mem_cost=_env_int(env, prefix + "MEM_COST", DEFAULT_MEM_COST),
            strict=strict,
        )

    @property
    def is_valid(self) -> bool:
        return bool(self.signer_key) and bool(self.salt_separator)

    def memory_required(self) -> int:
        """Bytes of working memory one derivation needs (128 * r * N * p)."""
        return 128 * self.rounds * (1 << max(self.mem_cost, 0)) * P


def _decode(value: str, strict: bool) -> bytes:
    if not value:
        return b""
    try:
        return b64decode_strict(value)
    except DecodingError:
        if strict:
            raise
        return b""


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e
