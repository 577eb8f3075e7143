"""Hashing parameters and their defaults."""
from __future__ import annotations

import os
from dataclasses import dataclass, replace

from dotenv import load_dotenv

from .errors import InvalidHashConfig

# Lengths are hex characters: 512 -> 256 key bytes, 128 -> 64 salt bytes.
DEF_LEN = 512
DEF_SALT_LEN = 128
DEF_ITERATIONS = 18000
DEF_DIGEST = "sha512"


def _check_even(name: str, value) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0 or value % 2:
        raise InvalidHashConfig(f"{name} must be a positive even integer, got {value!r}")


@dataclass(frozen=True)
class HashConfig:
    length: int = DEF_LEN
    salt_length: int = DEF_SALT_LEN
    iterations: int = DEF_ITERATIONS
    digest: str = DEF_DIGEST

    def __post_init__(self):
        _check_even("length", self.length)
        _check_even("salt_length", self.salt_length)
        if not isinstance(self.iterations, int) or isinstance(self.iterations, bool) or self.iterations <= 0:
            raise InvalidHashConfig(f"iterations must be a positive integer, got {self.iterations!r}")
        if not isinstance(self.digest, str) or not self.digest:
            raise InvalidHashConfig(f"digest must be a non-empty string, got {self.digest!r}")

    @property
    def key_bytes(self) -> int:
        return self.length // 2

    @property
    def salt_bytes(self) -> int:
        return self.salt_length // 2

    def merge(self, **fields) -> "HashConfig":
        """Return a copy with every field that isn't None replaced."""
        updates = {k: v for k, v in fields.items() if v is not None}
        return replace(self, **updates) if updates else self

    @classmethod
    def from_env(cls, prefix: str = "PWHELPER_") -> "HashConfig":
        """Build a config from PWHELPER_LEN, PWHELPER_SALT_LEN, PWHELPER_ITERATIONS
        and PWHELPER_DIGEST. A .env file in the working directory is loaded first.
        Unset variables keep the defaults.
        """
        load_dotenv()
        return cls().merge(
            length=_env_int(prefix + "LEN"),
            salt_length=_env_int(prefix + "SALT_LEN"),
            iterations=_env_int(prefix + "ITERATIONS"),
            digest=os.getenv(prefix + "DIGEST") or None,
        )


def _env_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise InvalidHashConfig(f"{name} must be an integer, got {raw!r}") from e
