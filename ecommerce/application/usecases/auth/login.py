"""
===============================================================================
USE CASE: Login
===============================================================================

Name:
    Login Use Case

Business Goal:
    Autenticar una credencial (login + password) y emitir un token opaco con
    validez de 30 días.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    LoginUseCase

Responsibilities:
    - Buscar la credencial almacenada por login.
    - Comparar el password recibido contra el hash almacenado.
    - Firmar un token con payload {login} y validez 43200 minutos.
    - Devolver un AuthResult con error estable.

Collaborators:
    - AuthRepository.get_by_login(ctx, login) -> Lookup[Auth]
    - PasswordService.matches(ctx, plain, hashed) -> bool
    - TokenService.sign(ctx, info, validity_minutes) -> Token

-------------------------------------------------------------------------------
INPUTS / OUTPUTS
-------------------------------------------------------------------------------
Inputs:
    - ctx: ExecutionContext (se reenvía a cada colaborador)
    - auth: Auth (login + password plaintext)

Outputs:
    - AuthResult(token | error)

Error Mapping:
    - LOOKUP_FAILED:        el repositorio no pudo responder
    - INVALID_CREDENTIALS:  login inexistente o password incorrecto
    - HASHING_FAILED:       el servicio de hashing falló
    - TOKEN_SIGNING_FAILED: el servicio de tokens falló
    - CANCELLED:            un colaborador reportó cancelación/deadline
===============================================================================
"""

from __future__ import annotations

from ....context import ExecutionContext
from ....crosscutting.exceptions import OperationCancelled, PasswordHashingError
from ....domain.entities import Auth
from ....domain.repositories import AuthRepository
from ....domain.services import PasswordService, TokenService
from .auth_results import AuthErrorCode, AuthResult, auth_failure
from .auth_utils import (
    MSG_HASHING_FAILED,
    MSG_INVALID_CREDENTIALS,
    cancelled_error,
    lookup_error,
    sign_login_token,
)


class LoginUseCase:
    """
    Use Case (Application Service / Query + Command):
        Orquesta la verificación de credenciales y la emisión del token.
    """

    def __init__(
        self,
        auth_repository: AuthRepository,
        password_service: PasswordService,
        token_service: TokenService,
    ) -> None:
        self._credentials = auth_repository
        self._passwords = password_service
        self._tokens = token_service

    def execute(self, ctx: ExecutionContext, auth: Auth) -> AuthResult:
        try:
            return self._login(ctx, auth)
        except OperationCancelled:
            return AuthResult(error=cancelled_error())

    def _login(self, ctx: ExecutionContext, auth: Auth) -> AuthResult:
        # ---------------------------------------------------------------------
        # 1) Buscar credencial. Not found y password incorrecto se reportan
        #    igual para no filtrar qué logins existen.
        # ---------------------------------------------------------------------
        lookup = self._credentials.get_by_login(ctx, auth.login)
        if lookup.is_failed:
            return AuthResult(error=lookup_error(lookup, "credential"))
        if lookup.is_not_found:
            return auth_failure(
                AuthErrorCode.INVALID_CREDENTIALS, MSG_INVALID_CREDENTIALS
            )
        stored = lookup.value

        # ---------------------------------------------------------------------
        # 2) Comparar password vs hash almacenado.
        # ---------------------------------------------------------------------
        try:
            matches = self._passwords.matches(ctx, auth.password, stored.password)
        except PasswordHashingError:
            return auth_failure(AuthErrorCode.HASHING_FAILED, MSG_HASHING_FAILED)
        if not matches:
            return auth_failure(
                AuthErrorCode.INVALID_CREDENTIALS, MSG_INVALID_CREDENTIALS
            )

        # ---------------------------------------------------------------------
        # 3) Firmar token {login} con validez fija.
        # ---------------------------------------------------------------------
        return sign_login_token(ctx, self._tokens, auth.login)
