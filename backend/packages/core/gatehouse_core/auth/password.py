"""
Password hashing.

Thin wrapper over bcrypt. Hashes are stored as UTF-8 strings.
"""

import bcrypt


def hash_password(password: str, rounds: int = 12) -> str:
    """
    Hash a password for storage.

    Args:
        password: Plain text password.
        rounds: bcrypt cost factor.

    Returns:
        bcrypt hash string.
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a password against a stored hash.

    Args:
        plain: Plain text password.
        hashed: Stored bcrypt hash.

    Returns:
        True if the password matches, False otherwise (including malformed hashes).
    """
    if not plain or not hashed:
        return False
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Malformed or non-bcrypt hash
        return False
