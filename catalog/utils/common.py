# catalog/utils/common.py
import hashlib
import hmac
import secrets

PBKDF2_ITERATIONS = 260000


def hash_secret(secret: str, salt: str = None) -> str:
    """Salted PBKDF2-SHA256 digest of a password, stored as ``salt$digest``."""
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac("sha256", secret.encode(), salt.encode(), PBKDF2_ITERATIONS)
    return f"{salt}${digest.hex()}"


def verify_secret(secret: str, stored: str) -> bool:
    salt, _, expected = stored.partition("$")
    if not salt or not expected:
        return False
    candidate = hash_secret(secret, salt).partition("$")[2]
    return hmac.compare_digest(candidate, expected)
