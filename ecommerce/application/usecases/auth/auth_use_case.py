"""
===============================================================================
AUTH USE CASE (Facade)
===============================================================================

Name:
    AuthUseCase

Business Goal:
    Exponer las cuatro operaciones de autenticación detrás de un único objeto
    construido con sus colaboradores, para que la capa HTTP dependa de un
    solo punto de entrada.

Notas:
    - Cada operación delega en su use case (LoginUseCase, SignUpUseCase, ...).
    - Cada operación corre dentro de request_scope(ctx): los logs de los
      adaptadores llevan el request_id del contexto.
    - Los colaboradores de forgot-password son opcionales: un despliegue sin
      canal out-of-band puede ofrecer solo login/sign-up. Invocar esas
      operaciones sin configurarlos es un error de wiring (RuntimeError).
    - TTL e intentos del código: si no se pasan, salen de Settings.
===============================================================================
"""

from __future__ import annotations

from ....context import ExecutionContext, request_scope
from ....crosscutting.config import get_settings
from ....domain.entities import Auth, ResetRequest, User
from ....domain.repositories import AuthRepository, ResetCodeRepository, UserRepository
from ....domain.services import (
    Clock,
    PasswordService,
    ResetCodeGenerator,
    ResetCodeSender,
    TokenService,
)
from .auth_results import AuthResult, ForgotPassCodeResult
from .forgot_pass_code import ForgotPassCodeUseCase
from .forgot_pass_reset import ForgotPassResetUseCase
from .login import LoginUseCase
from .sign_up import SignUpUseCase


class AuthUseCase:
    def __init__(
        self,
        password_service: PasswordService,
        token_service: TokenService,
        auth_repository: AuthRepository,
        user_repository: UserRepository,
        *,
        reset_codes: ResetCodeRepository | None = None,
        code_generator: ResetCodeGenerator | None = None,
        code_sender: ResetCodeSender | None = None,
        clock: Clock | None = None,
        reset_code_ttl_minutes: int | None = None,
        reset_code_max_attempts: int | None = None,
    ) -> None:
        self._login = LoginUseCase(auth_repository, password_service, token_service)
        self._sign_up = SignUpUseCase(
            auth_repository, user_repository, password_service, token_service
        )

        self._forgot_code: ForgotPassCodeUseCase | None = None
        self._forgot_reset: ForgotPassResetUseCase | None = None
        if reset_codes is not None and clock is not None:
            self._forgot_reset = ForgotPassResetUseCase(
                auth_repository, reset_codes, password_service, token_service, clock
            )
            if code_generator is not None and code_sender is not None:
                if reset_code_ttl_minutes is None:
                    reset_code_ttl_minutes = get_settings().reset_code_ttl_minutes
                if reset_code_max_attempts is None:
                    reset_code_max_attempts = get_settings().reset_code_max_attempts
                self._forgot_code = ForgotPassCodeUseCase(
                    auth_repository,
                    reset_codes,
                    code_generator,
                    code_sender,
                    clock,
                    code_ttl_minutes=reset_code_ttl_minutes,
                    max_attempts=reset_code_max_attempts,
                )

    def login(self, ctx: ExecutionContext, auth: Auth) -> AuthResult:
        with request_scope(ctx):
            return self._login.execute(ctx, auth)

    def sign_up(self, ctx: ExecutionContext, auth: Auth, user: User) -> AuthResult:
        with request_scope(ctx):
            return self._sign_up.execute(ctx, auth, user)

    def forgot_pass_code(self, ctx: ExecutionContext, login: str) -> ForgotPassCodeResult:
        if self._forgot_code is None:
            raise RuntimeError(
                "forgot_pass_code requires reset_codes, code_generator, "
                "code_sender and clock"
            )
        with request_scope(ctx):
            return self._forgot_code.execute(ctx, login)

    def forgot_pass_reset(
        self, ctx: ExecutionContext, request: ResetRequest
    ) -> AuthResult:
        if self._forgot_reset is None:
            raise RuntimeError("forgot_pass_reset requires reset_codes and clock")
        with request_scope(ctx):
            return self._forgot_reset.execute(ctx, request)
