"""Password hashing package: salted PBKDF2 key stretching and verification."""
from .config import HashConfig, DEF_LEN, DEF_SALT_LEN, DEF_ITERATIONS, DEF_DIGEST
from .errors import InvalidHashConfig
from .hasher import PasswordHasher, HashResult, hash_password, verify_password
from .options import HashOptions
