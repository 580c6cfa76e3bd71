"""Password hashing with scrypt.

Stored form is ``<derived key hex>.<salt hex>``; the hex text of the salt is
what gets fed to scrypt.
"""
import hashlib
import hmac
import secrets

from ..errors import MalformedCredentialError

SALT_BYTES = 16
KEY_LENGTH = 64
SCRYPT_N = 16384
SCRYPT_R = 8
SCRYPT_P = 1


def _derive(password, salt):
    return hashlib.scrypt(
        password.encode('utf-8'),
        salt=salt.encode('utf-8'),
        n=SCRYPT_N,
        r=SCRYPT_R,
        p=SCRYPT_P,
        dklen=KEY_LENGTH,
    )


def hash_password(password):
    salt = secrets.token_hex(SALT_BYTES)
    return f"{_derive(password, salt).hex()}.{salt}"


def verify_password(supplied, stored):
    parts = stored.split('.') if isinstance(stored, str) else []
    if len(parts) != 2 or not all(parts):
        raise MalformedCredentialError()
    hashed, salt = parts
    try:
        stored_key = bytes.fromhex(hashed)
    except ValueError:
        raise MalformedCredentialError()
    # compare_digest does not short-circuit on the first differing byte
    return hmac.compare_digest(stored_key, _derive(supplied, salt))
