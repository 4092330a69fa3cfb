"""
Service adapters.

- Argon2PasswordService: PasswordService backed by argon2-cffi
- JWTTokenService: TokenService backed by PyJWT
- NumericResetCodeGenerator / InMemoryResetCodeOutbox / SystemClock
"""

from .argon2_password_service import Argon2PasswordService
from .jwt_token_service import JWTTokenService
from .reset_codes import (
    InMemoryResetCodeOutbox,
    NumericResetCodeGenerator,
    SentResetCode,
    SystemClock,
)

__all__ = [
    "Argon2PasswordService",
    "JWTTokenService",
    "NumericResetCodeGenerator",
    "InMemoryResetCodeOutbox",
    "SentResetCode",
    "SystemClock",
]
