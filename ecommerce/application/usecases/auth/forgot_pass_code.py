"""
===============================================================================
USE CASE: Forgot Password — Issue Code
===============================================================================

Business Goal:
    Emitir un código one-time para resetear el password de un login existente
    y despacharlo fuera de banda (email/SMS).

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    ForgotPassCodeUseCase

Responsibilities:
    - Validar que el login exista.
    - Generar el código y persistir SOLO su hash con expiración y cupo de intentos.
    - Despachar el código plaintext por el canal out-of-band.

Collaborators:
    - AuthRepository.get_by_login
    - ResetCodeGenerator.generate
    - ResetCodeRepository.store (reemplaza códigos previos del login)
    - ResetCodeSender.send
    - Clock.now

Error Mapping:
    - LOOKUP_FAILED / NOT_FOUND / STORAGE_FAILED / DELIVERY_FAILED / CANCELLED
===============================================================================
"""

from __future__ import annotations

from datetime import timedelta

from ....context import ExecutionContext
from ....crosscutting.exceptions import (
    DeliveryError,
    OperationCancelled,
    RepositoryError,
)
from ....domain.entities import RESET_CODE_MAX_ATTEMPTS, ResetCode
from ....domain.repositories import AuthRepository, ResetCodeRepository
from ....domain.services import Clock, ResetCodeGenerator, ResetCodeSender
from .auth_results import AuthErrorCode, ForgotPassCodeResult, code_failure
from .auth_utils import (
    MSG_DELIVERY_FAILED,
    MSG_LOGIN_NOT_FOUND,
    MSG_STORAGE_FAILED,
    cancelled_error,
    hash_reset_code,
    lookup_error,
)


class ForgotPassCodeUseCase:
    """Emite y despacha un código de reseteo para un login existente."""

    def __init__(
        self,
        auth_repository: AuthRepository,
        reset_codes: ResetCodeRepository,
        code_generator: ResetCodeGenerator,
        code_sender: ResetCodeSender,
        clock: Clock,
        *,
        code_ttl_minutes: int,
        max_attempts: int = RESET_CODE_MAX_ATTEMPTS,
    ) -> None:
        if code_ttl_minutes <= 0:
            raise ValueError("code_ttl_minutes must be greater than 0")
        if max_attempts <= 0:
            raise ValueError("max_attempts must be greater than 0")
        self._credentials = auth_repository
        self._reset_codes = reset_codes
        self._generator = code_generator
        self._sender = code_sender
        self._clock = clock
        self._ttl = timedelta(minutes=code_ttl_minutes)
        self._max_attempts = max_attempts

    def execute(self, ctx: ExecutionContext, login: str) -> ForgotPassCodeResult:
        try:
            return self._issue(ctx, login)
        except OperationCancelled:
            return ForgotPassCodeResult(sent=False, error=cancelled_error())

    def _issue(self, ctx: ExecutionContext, login: str) -> ForgotPassCodeResult:
        lookup = self._credentials.get_by_login(ctx, login)
        if lookup.is_failed:
            return ForgotPassCodeResult(
                sent=False, error=lookup_error(lookup, "credential")
            )
        if lookup.is_not_found:
            return code_failure(AuthErrorCode.NOT_FOUND, MSG_LOGIN_NOT_FOUND)

        code = self._generator.generate()
        reset_code = ResetCode(
            login=login,
            code_hash=hash_reset_code(code),
            expires_at=self._clock.now() + self._ttl,
            attempts_left=self._max_attempts,
        )

        try:
            self._reset_codes.store(ctx, reset_code)
        except RepositoryError:
            return code_failure(AuthErrorCode.STORAGE_FAILED, MSG_STORAGE_FAILED)

        # El código queda persistido aunque el envío falle; el caller puede
        # pedir uno nuevo, que reemplaza al anterior.
        try:
            self._sender.send(ctx, login, code)
        except DeliveryError:
            return code_failure(AuthErrorCode.DELIVERY_FAILED, MSG_DELIVERY_FAILED)

        return ForgotPassCodeResult(sent=True)
