"""Cookie secret generation."""

import secrets
import string

# Printable ASCII without whitespace
SECRET_ALPHABET = string.ascii_letters + string.digits + string.punctuation

SECRET_LENGTH = 32


def generate_secret(length: int = SECRET_LENGTH) -> str:
    """Generate a cryptographically strong random secret of `length` characters."""
    return "".join(secrets.choice(SECRET_ALPHABET) for _ in range(length))
