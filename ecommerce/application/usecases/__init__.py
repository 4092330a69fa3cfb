"""
Use Cases Layer (Business Operations)

Structure
---------
usecases/
└── auth/   # Login, sign-up and forgot-password flows

Usage
-----
    from ecommerce.application.usecases.auth import AuthUseCase, LoginUseCase
"""

from .auth import (
    AuthError,
    AuthErrorCode,
    AuthResult,
    AuthUseCase,
    ForgotPassCodeResult,
    ForgotPassCodeUseCase,
    ForgotPassResetUseCase,
    LoginUseCase,
    SignUpUseCase,
)

__all__ = [
    "AuthUseCase",
    "LoginUseCase",
    "SignUpUseCase",
    "ForgotPassCodeUseCase",
    "ForgotPassResetUseCase",
    "AuthResult",
    "ForgotPassCodeResult",
    "AuthError",
    "AuthErrorCode",
]
