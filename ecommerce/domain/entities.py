"""
===============================================================================
TARJETA CRC — domain/entities.py
===============================================================================

Módulo:
    Entidades del Dominio de autenticación (Auth, User, TokenInfo, ResetCode)

Responsabilidades:
    - Definir las estructuras centrales del flujo de auth (sin infraestructura).
    - Brindar helpers mínimos para mantener invariantes simples.
    - Mantener tipos claros para casos de uso y repositorios.

Colaboradores:
    - domain.repositories: persisten/recuperan estas entidades.
    - application/usecases/auth: construyen/consumen estas entidades.

Principios:
    - Sin dependencias a DB/HTTP/cripto.
    - Un Auth en reposo SIEMPRE lleva el hash, nunca el plaintext.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Final, NewType

# Tokens opacos: el caso de uso no asume estructura interna.
Token = NewType("Token", str)

# 30 días expresados en minutos.
TOKEN_VALIDITY_MINUTES: Final[int] = 30 * 24 * 60

# Intentos fallidos tolerados antes de invalidar un código de reseteo.
RESET_CODE_MAX_ATTEMPTS: Final[int] = 5


# ---------------------------------------------------------------------------
# Credencial
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Auth:
    """
    Credencial: login (único) + password.

    Importante:
      - En la entrada `password` es plaintext.
      - En reposo (repositorio) `password` es el hash.
      - `confirm_password` solo viaja en requests de formulario.
    """

    login: str
    password: str = ""
    confirm_password: str = ""


# ---------------------------------------------------------------------------
# Perfil de usuario
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class User:
    """Perfil de usuario (email único)."""

    email: str
    first_name: str = ""
    last_name: str = ""
    phone_number: str = ""
    address: str = ""


# ---------------------------------------------------------------------------
# Token payload
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class TokenInfo:
    """Payload mínimo firmado dentro de un token: el login identifier."""

    info: str


# ---------------------------------------------------------------------------
# Forgot password
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ResetRequest:
    """Pedido de reseteo: código one-time + nuevo password (plaintext)."""

    login: str
    code: str
    new_password: str
    confirm_password: str = ""


@dataclass(frozen=True, slots=True)
class ResetCode:
    """
    Código de reseteo persistido.

    Notas:
      - Se guarda solo el hash (sha256 hex) del código; el plaintext viaja
        únicamente por el canal out-of-band.
      - Un código es “vivo” si no fue usado, no expiró y le quedan intentos.
      - Cada intento con un código incorrecto descuenta uno de attempts_left.
    """

    login: str
    code_hash: str
    expires_at: datetime
    used_at: datetime | None = None
    attempts_left: int = RESET_CODE_MAX_ATTEMPTS

    @property
    def is_used(self) -> bool:
        return self.used_at is not None

    def is_live(self, now: datetime) -> bool:
        return not self.is_used and self.attempts_left > 0 and now < self.expires_at
