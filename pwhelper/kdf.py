"""Salt generation and PBKDF2 key derivation."""
from __future__ import annotations

import logging
from os import urandom

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

logger = logging.getLogger(__name__)

DIGESTS = {
    "md5": hashes.MD5,
    "sha1": hashes.SHA1,
    "sha224": hashes.SHA224,
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
    "sha512224": hashes.SHA512_224,
    "sha512256": hashes.SHA512_256,
    "sha2224": hashes.SHA224,
    "sha2256": hashes.SHA256,
    "sha2384": hashes.SHA384,
    "sha2512": hashes.SHA512,
    "sha2512224": hashes.SHA512_224,
    "sha2512256": hashes.SHA512_256,
    "sha3224": hashes.SHA3_224,
    "sha3256": hashes.SHA3_256,
    "sha3384": hashes.SHA3_384,
    "sha3512": hashes.SHA3_512,
    "blake2b512": lambda: hashes.BLAKE2b(64),
    "blake2s256": lambda: hashes.BLAKE2s(32),
    "sm3": hashes.SM3,
}


def resolve_digest(name: str) -> hashes.HashAlgorithm:
    """Map an OpenSSL style digest name ("sha512", "SHA-512/256", "sha2-256", "blake2b512") to a hash algorithm."""
    key = name.lower().replace("-", "").replace("_", "").replace("/", "")
    try:
        return DIGESTS[key]()
    except KeyError:
        raise UnsupportedAlgorithm(f"Unsupported digest: {name!r}") from None


def _to_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def generate_salt(n_bytes: int) -> str:
    return urandom(n_bytes).hex()


def derive_key(password: str | bytes, salt: str | bytes, iterations: int,
               key_bytes: int, digest: str) -> bytes:
    # The salt is used as text: a hex salt string feeds its characters, not the decoded bytes.
    algorithm = resolve_digest(digest)
    logger.debug("pbkdf2 derive: digest=%s iterations=%d key_bytes=%d", algorithm.name, iterations, key_bytes)
    kdf = PBKDF2HMAC(algorithm=algorithm, length=key_bytes,
                     salt=_to_bytes(salt), iterations=iterations)
    return kdf.derive(_to_bytes(password))
