"""
===============================================================================
TARJETA CRC — infrastructure/services/argon2_password_service.py
===============================================================================

Clase:
    Argon2PasswordService

Responsabilidades:
    - Hashear passwords con Argon2 (PasswordService.encode).
    - Verificar plaintext vs hash (PasswordService.matches).
    - Traducir fallas del hasher a PasswordHashingError.

Colaboradores:
    - argon2.PasswordHasher
    - crosscutting.exceptions.PasswordHashingError
    - crosscutting.logger

Notas:
    - Un hash malformado se trata como “no coincide”: nunca autentica.
    - No loguear passwords ni hashes.
===============================================================================
"""

from __future__ import annotations

from argon2 import PasswordHasher
from argon2.exceptions import (
    HashingError,
    InvalidHashError,
    VerificationError,
    VerifyMismatchError,
)

from ...context import ExecutionContext
from ...crosscutting.exceptions import PasswordHashingError
from ...crosscutting.logger import logger


class Argon2PasswordService:
    def __init__(self, hasher: PasswordHasher | None = None) -> None:
        self._hasher = hasher or PasswordHasher()

    def encode(self, ctx: ExecutionContext, plain: str) -> str:
        ctx.raise_if_done()
        try:
            return self._hasher.hash(plain)
        except HashingError as exc:
            logger.error("Password hashing failed", extra={"error": str(exc)})
            raise PasswordHashingError(
                "Password hashing failed.", original_error=exc
            ) from exc

    def matches(self, ctx: ExecutionContext, plain: str, hashed: str) -> bool:
        ctx.raise_if_done()
        try:
            return self._hasher.verify(hashed, plain)
        except VerifyMismatchError:
            return False
        except (VerificationError, InvalidHashError):
            logger.warning("Stored password hash could not be verified")
            return False

    def needs_rehash(self, hashed: str) -> bool:
        """True si el hash fue generado con parámetros viejos."""
        return self._hasher.check_needs_rehash(hashed)
