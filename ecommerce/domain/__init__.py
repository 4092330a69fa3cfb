"""
===============================================================================
TARJETA CRC — domain/__init__.py
===============================================================================

Módulo:
    Exportaciones de la Capa de Dominio (API pública del dominio)

Responsabilidades:
    - Centralizar exports para imports limpios en application/infrastructure.
    - Evitar imports profundos y acoplamientos innecesarios.

Reglas:
    - Solo re-exporta contratos/entidades del dominio.
    - No importar infraestructura aquí.
===============================================================================
"""

from .entities import (
    RESET_CODE_MAX_ATTEMPTS,
    TOKEN_VALIDITY_MINUTES,
    Auth,
    ResetCode,
    ResetRequest,
    Token,
    TokenInfo,
    User,
)
from .repositories import AuthRepository, ResetCodeRepository, UserRepository
from .services import (
    Clock,
    PasswordService,
    ResetCodeGenerator,
    ResetCodeSender,
    TokenService,
)
from .value_objects import Lookup, LookupStatus

__all__ = [
    # Entities
    "Auth",
    "User",
    "Token",
    "TokenInfo",
    "ResetRequest",
    "ResetCode",
    "RESET_CODE_MAX_ATTEMPTS",
    "TOKEN_VALIDITY_MINUTES",
    # Repository Interfaces (Ports)
    "AuthRepository",
    "UserRepository",
    "ResetCodeRepository",
    # Service Interfaces (Ports)
    "PasswordService",
    "TokenService",
    "ResetCodeGenerator",
    "ResetCodeSender",
    "Clock",
    # Value Objects
    "Lookup",
    "LookupStatus",
]
