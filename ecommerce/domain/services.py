"""
===============================================================================
TARJETA CRC — domain/services.py
===============================================================================

Módulo:
    Puertos de Servicios Externos (Protocols)

Responsabilidades:
    - Definir contratos para hashing de passwords, firma de tokens, generación
      y envío de códigos de reseteo, y reloj.
    - Proteger a application de detalles del proveedor (argon2, JWT, email/SMS).

Colaboradores:
    - infrastructure/services/*: implementaciones concretas.
    - application/usecases/auth: consumen estos puertos.

Reglas:
    - SOLO interfaces: nada de implementación.
    - Errores tipados (crosscutting.exceptions) en lugar de valores centinela.
===============================================================================
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from ..context import ExecutionContext
from .entities import Token, TokenInfo


class PasswordService(Protocol):
    """Contrato de hashing de passwords."""

    def encode(self, ctx: ExecutionContext, plain: str) -> str:
        """Hashea un password. Lanza PasswordHashingError si falla."""
        ...

    def matches(self, ctx: ExecutionContext, plain: str, hashed: str) -> bool:
        """Compara plaintext contra hash almacenado."""
        ...


class TokenService(Protocol):
    """Contrato de firma/validación de tokens opacos."""

    def sign(
        self, ctx: ExecutionContext, info: TokenInfo, validity_minutes: int
    ) -> Token:
        """Firma un token. Lanza TokenSigningError si falla."""
        ...

    def validate(self, ctx: ExecutionContext, token: Token) -> TokenInfo:
        """Valida un token. Lanza InvalidTokenError si expiró o es inválido."""
        ...


class ResetCodeGenerator(Protocol):
    """Contrato para generar códigos one-time."""

    def generate(self) -> str: ...


class ResetCodeSender(Protocol):
    """Contrato para despachar un código fuera de banda (email/SMS/etc.)."""

    def send(self, ctx: ExecutionContext, login: str, code: str) -> None:
        """Lanza DeliveryError si el envío falla."""
        ...


class Clock(Protocol):
    """Fuente de tiempo (UTC) para tests determinísticos."""

    def now(self) -> datetime: ...
