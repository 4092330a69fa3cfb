"""
===============================================================================
USE CASE: Forgot Password — Reset
===============================================================================

Business Goal:
    Consumir un código one-time vivo, reemplazar el password almacenado y
    devolver un token nuevo.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    ForgotPassResetUseCase

Collaborators:
    - ResetCodeRepository: consume
    - PasswordService: encode
    - AuthRepository: update_password
    - TokenService: sign
    - Clock: now

-------------------------------------------------------------------------------
FLOW
-------------------------------------------------------------------------------
1) new_password no vacío y == confirm_password   -> VALIDATION_ERROR
2) consume (compare-and-set: existe, vivo, hash coincide)
                                                 -> INVALID_RESET_CODE / STORAGE_FAILED
3) Hash del password nuevo                       -> HASHING_FAILED
4) update_password                               -> STORAGE_FAILED
5) Firmar token {login}                          -> TOKEN_SIGNING_FAILED

Invariantes:
    - El código se consume ANTES de tocar la credencial: el password nunca
      cambia con el código todavía canjeable. Si un paso posterior falla el
      código ya quedó gastado y el usuario pide uno nuevo.
    - Un código incorrecto descuenta un intento del código vivo.
===============================================================================
"""

from __future__ import annotations

from ....context import ExecutionContext
from ....crosscutting.exceptions import (
    OperationCancelled,
    PasswordHashingError,
    RepositoryError,
)
from ....domain.entities import ResetRequest
from ....domain.repositories import AuthRepository, ResetCodeRepository
from ....domain.services import Clock, PasswordService, TokenService
from .auth_results import AuthErrorCode, AuthResult, auth_failure
from .auth_utils import (
    MSG_HASHING_FAILED,
    MSG_INVALID_RESET_CODE,
    MSG_STORAGE_FAILED,
    cancelled_error,
    hash_reset_code,
    sign_login_token,
)


class ForgotPassResetUseCase:
    def __init__(
        self,
        auth_repository: AuthRepository,
        reset_codes: ResetCodeRepository,
        password_service: PasswordService,
        token_service: TokenService,
        clock: Clock,
    ) -> None:
        self._credentials = auth_repository
        self._reset_codes = reset_codes
        self._passwords = password_service
        self._tokens = token_service
        self._clock = clock

    def execute(self, ctx: ExecutionContext, request: ResetRequest) -> AuthResult:
        try:
            return self._reset(ctx, request)
        except OperationCancelled:
            return AuthResult(error=cancelled_error())

    def _reset(self, ctx: ExecutionContext, request: ResetRequest) -> AuthResult:
        if not request.new_password:
            return auth_failure(
                AuthErrorCode.VALIDATION_ERROR, "new password is required"
            )
        if request.new_password != request.confirm_password:
            return auth_failure(AuthErrorCode.VALIDATION_ERROR, "passwords do not match")

        try:
            consumed = self._reset_codes.consume(
                ctx, request.login, hash_reset_code(request.code), self._clock.now()
            )
        except RepositoryError:
            return auth_failure(AuthErrorCode.STORAGE_FAILED, MSG_STORAGE_FAILED)
        if not consumed:
            return auth_failure(AuthErrorCode.INVALID_RESET_CODE, MSG_INVALID_RESET_CODE)

        try:
            hashed = self._passwords.encode(ctx, request.new_password)
        except PasswordHashingError:
            return auth_failure(AuthErrorCode.HASHING_FAILED, MSG_HASHING_FAILED)

        try:
            self._credentials.update_password(ctx, request.login, hashed)
        except RepositoryError:
            return auth_failure(AuthErrorCode.STORAGE_FAILED, MSG_STORAGE_FAILED)

        return sign_login_token(ctx, self._tokens, request.login)
