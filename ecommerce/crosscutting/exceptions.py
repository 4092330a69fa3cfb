# ecommerce/crosscutting/exceptions.py
"""
===============================================================================
MÓDULO: Excepciones tipadas de colaboradores (errores internos)
===============================================================================

Objetivo
--------
Tener excepciones internas coherentes que los adaptadores (repositorios,
hashing, tokens, envío de códigos) lanzan y que los casos de uso traducen a
un AuthError estable:
- error_code estable
- error_id para correlación con logs
- message “humana” (sin filtrar secretos)

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  AppError + subclases

Responsabilidades:
  - Estandarizar errores de infraestructura/colaboradores
  - Generar error_id para rastreo

Colaboradores:
  - application/usecases/auth (mapea a AuthErrorCode)
  - infrastructure/* (lanza estas excepciones)
  - crosscutting/logger.py
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True)
class ErrorResponse:
    """Estructura mínima para reportar errores de forma consistente."""

    error_code: str
    message: str
    error_id: str

    def to_dict(self) -> dict:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "error_id": self.error_id,
        }


class AppError(Exception):
    """
    ----------------------------------------------------------------------------
    CRC (Class Card)
    ----------------------------------------------------------------------------
    Clase:
      AppError

    Responsabilidades:
      - Base para errores internos del sistema
      - Proveer error_code + error_id + message

    Colaboradores:
      - application/usecases/auth
    ----------------------------------------------------------------------------
    """

    error_code: str = "APP_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        self.original_error = original_error
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(
            error_code=self.error_code, message=self.message, error_id=self.error_id
        )


class RepositoryError(AppError):
    """Errores de persistencia (backend no disponible, escritura fallida)."""

    error_code: str = "REPOSITORY_ERROR"


class DuplicateError(RepositoryError):
    """Violación de unicidad detectada por el storage (login o email)."""

    error_code: str = "DUPLICATE"


class PasswordHashingError(AppError):
    """Errores del servicio de hashing de passwords."""

    error_code: str = "PASSWORD_HASHING_ERROR"


class TokenSigningError(AppError):
    """Errores al firmar un token."""

    error_code: str = "TOKEN_SIGNING_ERROR"


class InvalidTokenError(AppError):
    """Token expirado, con firma inválida o sin claims mínimos."""

    error_code: str = "INVALID_TOKEN"


class DeliveryError(AppError):
    """Errores al despachar un código de reseteo fuera de banda."""

    error_code: str = "DELIVERY_ERROR"


class OperationCancelled(AppError):
    """El contexto de ejecución fue cancelado o superó su deadline."""

    error_code: str = "CANCELLED"
