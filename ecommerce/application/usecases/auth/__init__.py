"""
===============================================================================
AUTH USE CASES PACKAGE (Public API / Exports)
===============================================================================

Responsibilities:
    - Re-exportar los casos de uso de autenticación y su facade.
    - Re-exportar resultados y errores compartidos.
    - Definir __all__ como contrato de API pública del paquete.
===============================================================================
"""

from .auth_results import AuthError, AuthErrorCode, AuthResult, ForgotPassCodeResult
from .auth_use_case import AuthUseCase
from .forgot_pass_code import ForgotPassCodeUseCase
from .forgot_pass_reset import ForgotPassResetUseCase
from .login import LoginUseCase
from .sign_up import SignUpUseCase

__all__ = [
    # Facade
    "AuthUseCase",
    # Use cases
    "LoginUseCase",
    "SignUpUseCase",
    "ForgotPassCodeUseCase",
    "ForgotPassResetUseCase",
    # Results
    "AuthResult",
    "ForgotPassCodeResult",
    "AuthError",
    "AuthErrorCode",
]
