"""Credentials — one-way password hashing behind an opaque interface.

Invariants:
    - Raw passwords are never stored or returned
    - verify_password never raises on a malformed stored hash (returns False)
    - A lookup miss costs the same hash work as a wrong password
      (verify_password_decoy)

Design Decisions:
    - passlib CryptContext: the hash scheme can be rotated (deprecated="auto")
      without touching callers
    - pbkdf2_sha256: pure-hashlib backend, no native extension required
"""

from passlib.context import CryptContext

_pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
_DECOY_HASH = _pwd_context.hash("editfolio-decoy-credential")


def hash_password(password: str) -> str:
    return _pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    try:
        return _pwd_context.verify(password, hashed)
    except (ValueError, TypeError):
        return False


def verify_password_decoy(password: str) -> None:
    """Run a full verify against a fixed hash; result is discarded."""
    verify_password(password, _DECOY_HASH)
