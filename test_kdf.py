import hashlib

import pytest
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes

from pwhelper.kdf import derive_key, generate_salt, resolve_digest


def test_generate_salt_length_and_charset():
    s = generate_salt(64)
    assert len(s) == 128
    assert s == s.lower()
    bytes.fromhex(s)


def test_generate_salt_random():
    assert generate_salt(16) != generate_salt(16)


@pytest.mark.parametrize("name,algo", [
    ("sha512", hashes.SHA512),
    ("SHA256", hashes.SHA256),
    ("sha-384", hashes.SHA384),
    ("sha1", hashes.SHA1),
    ("sha3-256", hashes.SHA3_256),
    ("sha512_256", hashes.SHA512_256),
    ("md5", hashes.MD5),
])
def test_resolve_digest(name, algo):
    assert isinstance(resolve_digest(name), algo)


def test_resolve_digest_unknown():
    with pytest.raises(UnsupportedAlgorithm):
        resolve_digest("ripemd-9000")


@pytest.mark.parametrize("digest", ["sha1", "sha256", "sha512"])
def test_derive_matches_hashlib(digest):
    got = derive_key("secret", "a1b2c3", 50, 24, digest)
    assert got == hashlib.pbkdf2_hmac(digest, b"secret", b"a1b2c3", 50, 24)


def test_derive_accepts_bytes():
    assert derive_key(b"secret", b"salt", 5, 16, "sha256") == derive_key("secret", "salt", 5, 16, "sha256")


def test_derive_empty_password():
    a = derive_key("", "salt", 5, 16, "sha256")
    assert len(a) == 16
    assert a == derive_key("", "salt", 5, 16, "sha256")


@pytest.mark.parametrize("name,algo,size", [
    ("blake2b512", hashes.BLAKE2b, 64),
    ("BLAKE2s256", hashes.BLAKE2s, 32),
    ("sha2-512", hashes.SHA512, 64),
    ("SHA-512/256", hashes.SHA512_256, 32),
    ("sm3", hashes.SM3, 32),
])
def test_resolve_openssl_names(name, algo, size):
    got = resolve_digest(name)
    assert isinstance(got, algo)
    assert got.digest_size == size
