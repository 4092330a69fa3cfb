"""
Name: Auth Use Case Helpers

Responsibilities:
  - Sign the login token exactly the same way for every flow
  - Map failed lookups to a stable AuthError
  - Hash one-time reset codes

Collaborators:
  - domain.services.TokenService
  - domain.value_objects.Lookup
  - auth_results
"""

from __future__ import annotations

import hashlib
from typing import Final

from ....context import ExecutionContext
from ....crosscutting.exceptions import OperationCancelled, TokenSigningError
from ....domain.entities import TOKEN_VALIDITY_MINUTES, TokenInfo
from ....domain.services import TokenService
from ....domain.value_objects import Lookup
from .auth_results import AuthError, AuthErrorCode, AuthResult, auth_failure

MSG_INVALID_CREDENTIALS: Final[str] = "invalid credentials"
MSG_LOGIN_TAKEN: Final[str] = "login already taken"
MSG_EMAIL_TAKEN: Final[str] = "email already registered"
MSG_HASHING_FAILED: Final[str] = "password hashing failed"
MSG_TOKEN_SIGNING_FAILED: Final[str] = "token signing failed"
MSG_STORAGE_FAILED: Final[str] = "could not store credentials"
MSG_LOGIN_NOT_FOUND: Final[str] = "login not found"
MSG_INVALID_RESET_CODE: Final[str] = "invalid or expired reset code"
MSG_DELIVERY_FAILED: Final[str] = "could not deliver reset code"
MSG_CANCELLED: Final[str] = "operation cancelled"


def sign_login_token(
    ctx: ExecutionContext, token_service: TokenService, login: str
) -> AuthResult:
    """Firma {login} con la validez fija de 30 días."""
    try:
        token = token_service.sign(ctx, TokenInfo(info=login), TOKEN_VALIDITY_MINUTES)
    except TokenSigningError:
        return auth_failure(AuthErrorCode.TOKEN_SIGNING_FAILED, MSG_TOKEN_SIGNING_FAILED)
    return AuthResult(token=token)


def lookup_error(lookup: Lookup, what: str) -> AuthError:
    """Traduce un Lookup FAILED (cancelación incluida) a AuthError."""
    if isinstance(lookup.error, OperationCancelled):
        return AuthError(code=AuthErrorCode.CANCELLED, message=MSG_CANCELLED)
    return AuthError(code=AuthErrorCode.LOOKUP_FAILED, message=f"{what} lookup failed")


def cancelled_error() -> AuthError:
    return AuthError(code=AuthErrorCode.CANCELLED, message=MSG_CANCELLED)


def hash_reset_code(code: str) -> str:
    return hashlib.sha256(code.encode("utf-8")).hexdigest()
