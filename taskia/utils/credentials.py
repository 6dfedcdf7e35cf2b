"""
Credential helpers
==================

CPF normalization and password digests.

Passwords are stored as the base64 SHA-256 digest of their UTF-8 bytes,
without salt or iterations, so two accounts with the same password share a
digest. Replacing this with a slow salted hash only requires changing
``hash_password``/``verify_password``.
"""
import base64
import hashlib
import hmac

CPF_LENGTH = 11
_CPF_SEPARATORS = (".", "-", " ")


def normalize_cpf(cpf: str) -> str:
    """Strip punctuation and spaces from a CPF ("529.982.247-25" -> "52998224725")."""
    for separator in _CPF_SEPARATORS:
        cpf = cpf.replace(separator, "")
    return cpf.strip()


def is_valid_cpf_format(cpf: str) -> bool:
    """Check a normalized CPF has exactly 11 digits."""
    return len(cpf) == CPF_LENGTH and cpf.isdigit()


def hash_password(password: str) -> str:
    """Digest a plaintext password."""
    digest = hashlib.sha256(password.encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")


def verify_password(password: str, password_hash: str) -> bool:
    """Compare a plaintext password against a stored digest."""
    return hmac.compare_digest(hash_password(password), password_hash or "")
