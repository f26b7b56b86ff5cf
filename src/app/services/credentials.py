"""
Credential primitives

Password hashing, API key and session token generation. Pure functions, no
storage access; the auth and api_keys use cases call these.
"""

import base64
import hashlib
import secrets

import bcrypt

from config import ApplicationConfig

API_KEY_PREFIX = "ak_"
API_KEY_BYTES = 32
API_KEY_DISPLAY_PREFIX_LENGTH = 12
SESSION_TOKEN_BYTES = 48

# bcrypt only reads the first 72 bytes of its input
_BCRYPT_MAX_INPUT = 72


def _password_bytes(password: str) -> bytes:
    raw = password.encode("utf-8")
    if len(raw) > _BCRYPT_MAX_INPUT:
        raw = base64.b64encode(hashlib.sha256(raw).digest())
    return raw


def hash_password(password: str) -> str:
    """
    Hash a password with bcrypt and a fresh random salt.

    The returned string holds algorithm, cost, salt and digest, so two hashes
    of the same password differ and both verify.
    """
    hashed = bcrypt.hashpw(
        _password_bytes(password), bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS)
    )
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time check of a password against a stored bcrypt hash"""
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
    except ValueError:
        return False


def burn_password_check() -> None:
    """Spend the same effort as a real verification when there is nothing to verify"""
    bcrypt.checkpw(
        b"dummy_password", bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS)
    )


def generate_api_key() -> str:
    return API_KEY_PREFIX + secrets.token_hex(API_KEY_BYTES)


def hash_api_key(raw_key: str) -> str:
    return hashlib.sha256(raw_key.encode("utf-8")).hexdigest()


def api_key_prefix(raw_key: str) -> str:
    return raw_key[:API_KEY_DISPLAY_PREFIX_LENGTH]


def generate_session_token() -> str:
    return secrets.token_hex(SESSION_TOKEN_BYTES)


def hash_session_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()
