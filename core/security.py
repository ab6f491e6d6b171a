"""
Utilidades de seguridad: hash y verificación de contraseñas.
"""

import hashlib
import hmac
import os

PBKDF2_ITERATIONS = 100_000


def hash_password(password: str) -> tuple[str, str]:
    """
    Genera salt y hash (ambos hex) usando PBKDF2-HMAC-SHA256.

    Args:
        password: Contraseña en texto plano

    Returns:
        Tupla (salt_hex, hash_hex)
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return salt.hex(), dk.hex()


def verify_password(salt_hex: str, hash_hex: str, password: str) -> bool:
    """Verifica que password coincida con salt+hash almacenados."""
    salt = bytes.fromhex(salt_hex)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(dk.hex(), hash_hex)
