"""Salted password hashing with PBKDF2 key stretching."""
from __future__ import annotations

import asyncio
import hmac
import logging
from typing import NamedTuple

from .config import HashConfig
from .errors import InvalidHashConfig
from .kdf import derive_key, generate_salt
from .options import HashOptions

logger = logging.getLogger(__name__)


class HashResult(NamedTuple):
    password_hash: str
    salt: str


class PasswordHasher:
    """Hashes and verifies passwords against a stored (hash, salt) pair.

    `length` and `salt_length` count hex characters of the encoded output, so
    the raw key and salt are half that many bytes.

    `config` is a HashConfig, or a mapping / HashOptions of len, saltLen,
    iterations and digest. Keyword arguments take the same names (or length,
    salt_length) and win over `config`. Anything unset falls back to the
    module defaults.
    """

    def __init__(self, config=None, **options):
        base = config if isinstance(config, HashConfig) else HashConfig()
        fields = {}
        for source in (None if isinstance(config, HashConfig) else config, options):
            fields.update(HashOptions.coerce(source).model_dump(exclude_none=True))
        if "salt" in fields:
            raise InvalidHashConfig("salt is a per-call option, not a hasher default")
        self.config = base.merge(**fields)

    @classmethod
    def from_env(cls, prefix: str = "PWHELPER_") -> "PasswordHasher":
        return cls(HashConfig.from_env(prefix))

    def _resolve(self, opts: HashOptions) -> HashConfig:
        return self.config.merge(length=opts.length, salt_length=opts.salt_length,
                                 iterations=opts.iterations, digest=opts.digest)

    def hash(self, password: str | bytes, options=None) -> HashResult:
        """Derive a key for `password`.

        options: None, a mapping or a HashOptions with any of
        salt, len, saltLen, iterations, digest.
        Without a salt a random one of `salt_length` hex chars is generated.
        Returns (hex derived key, salt used).
        """
        opts = HashOptions.coerce(options)
        cfg = self._resolve(opts)
        salt = opts.salt if opts.salt else generate_salt(cfg.salt_bytes)
        key = derive_key(password, salt, cfg.iterations, cfg.key_bytes, cfg.digest)
        return HashResult(key.hex(), salt)

    def verify(self, password: str | bytes, password_hash: str, salt: str, options=None) -> bool:
        """True if `password` hashes to `password_hash` under `salt`.

        Uses the hasher's config unless `options` overrides len, iterations or digest.
        """
        opts = HashOptions.coerce(options).model_copy(update={"salt": salt})
        candidate, _ = self.hash(password, opts)
        if hmac.compare_digest(candidate.encode("utf-8"), password_hash.encode("utf-8")):
            return True
        logger.debug("password verification failed")
        return False

    async def hash_async(self, password: str | bytes, options=None) -> HashResult:
        return await asyncio.to_thread(self.hash, password, options)

    async def verify_async(self, password: str | bytes, password_hash: str, salt: str,
                           options=None) -> bool:
        return await asyncio.to_thread(self.verify, password, password_hash, salt, options)


ph = PasswordHasher()


def hash_password(password: str | bytes, **options) -> HashResult:
    return ph.hash(password, options)


def verify_password(password: str | bytes, password_hash: str, salt: str) -> bool:
    return ph.verify(password, password_hash, salt)
