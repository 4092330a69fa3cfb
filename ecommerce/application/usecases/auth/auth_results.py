"""
===============================================================================
AUTH USE CASE RESULTS (Shared Result / Error Models)
===============================================================================

Name:
    Auth Use Case Results

Business Goal:
    Proveer modelos compartidos de resultados y errores para los casos de uso
    de autenticación, con un contrato estable y explícito para:
      - fallas de lookup (backend no disponible)
      - conflictos (login/email ya registrados)
      - credenciales inválidas
      - fallas de hashing, firma de token, storage y envío

Why (Context / Intención):
    - Los use cases devuelven resultados tipados en lugar de lanzar excepciones
      “hacia afuera”, facilitando el mapeo a status codes en la capa HTTP.
    - Todos los errores son terminales para el request: no hay reintentos
      dentro del caso de uso.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Component:
    auth_results models (module)

Responsibilities:
    - Definir AuthErrorCode (categorías estables).
    - Representar AuthError (code + message).
    - Representar resultados:
        * AuthResult (token)
        * ForgotPassCodeResult (command specific: sent flag)

Collaborators:
    - domain.entities.Token
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ....domain.entities import Token


class AuthErrorCode(str, Enum):
    """
    Códigos de error para casos de uso de auth.

    Notas de diseño:
      - str + Enum facilita serialización directa (por ejemplo, en JSON).
      - Los códigos representan categorías estables (no mensajes).
    """

    LOOKUP_FAILED = "LOOKUP_FAILED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    LOGIN_TAKEN = "LOGIN_TAKEN"
    EMAIL_TAKEN = "EMAIL_TAKEN"
    HASHING_FAILED = "HASHING_FAILED"
    TOKEN_SIGNING_FAILED = "TOKEN_SIGNING_FAILED"
    STORAGE_FAILED = "STORAGE_FAILED"
    NOT_FOUND = "NOT_FOUND"
    INVALID_RESET_CODE = "INVALID_RESET_CODE"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    DELIVERY_FAILED = "DELIVERY_FAILED"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True)
class AuthError:
    """
    Error de caso de uso.

    Campos:
      - code: categoría estable (AuthErrorCode)
      - message: descripción humana, estable, sin secretos
    """

    code: AuthErrorCode
    message: str


@dataclass
class AuthResult:
    """
    Resultado para casos de uso que emiten un token.

    Contrato:
      - Si error is None => token presente (éxito)
      - Si error != None => token None (fallo)
    """

    token: Token | None = None
    error: AuthError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ForgotPassCodeResult:
    """
    Resultado específico para el comando ForgotPassCode.

    Campos:
      - sent: True si el código fue persistido y despachado
      - error: presente si la operación no pudo realizarse
    """

    sent: bool
    error: AuthError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def auth_failure(code: AuthErrorCode, message: str) -> AuthResult:
    """Crea un AuthResult consistente para un fallo."""
    return AuthResult(error=AuthError(code=code, message=message))


def code_failure(code: AuthErrorCode, message: str) -> ForgotPassCodeResult:
    """Crea un ForgotPassCodeResult consistente para un fallo."""
    return ForgotPassCodeResult(sent=False, error=AuthError(code=code, message=message))
