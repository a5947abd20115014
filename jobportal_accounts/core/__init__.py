from .config import Settings, get_settings
from .security import (
    MAX_PASSWORD_BYTES,
    password_too_long,
    hash_password,
    verify_password,
    create_jwt_token,
    decode_jwt_token,
)

__all__ = [
    "Settings",
    "get_settings",
    "MAX_PASSWORD_BYTES",
    "password_too_long",
    "hash_password",
    "verify_password",
    "create_jwt_token",
    "decode_jwt_token",
]

