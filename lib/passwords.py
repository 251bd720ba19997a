# =============================================================================
# lib/passwords.py - Password Hashing
# =============================================================================
# One-way salted bcrypt hashes. The salt and cost factor live inside the hash
# string, so verification needs nothing but the stored hash.
# =============================================================================

import bcrypt

DEFAULT_ROUNDS = 10


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """
    Hash a plaintext password.

    Args:
        password: Plaintext password
        rounds: bcrypt cost factor (log2 of the iteration count)

    Returns:
        The encoded bcrypt hash, e.g. "$2b$10$..."
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored hash."""
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


def _encode(password: str) -> bytes:
    # bcrypt only looks at the first 72 bytes and newer releases refuse longer input
    return password.encode("utf-8")[:72]
