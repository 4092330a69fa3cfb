"""
===============================================================================
USE CASE: Sign Up
===============================================================================

Name:
    Sign Up Use Case

Business Goal:
    Registrar una credencial nueva junto con su perfil de usuario y devolver
    un token listo para usar, garantizando:
      - login no tomado
      - email no registrado
      - password guardado SOLO como hash
      - credencial + perfil escritos como una unidad (sin usuarios a medias)

Why (Context / Intención):
    - Los pre-checks de unicidad son advisory: bajo concurrencia dos sign-ups
      del mismo login compiten en el storage, que es quien garantiza unicidad
      (DuplicateError -> STORAGE_FAILED).

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    SignUpUseCase

Collaborators:
    - AuthRepository: get_by_login, store_with_user
    - UserRepository: get_by_email
    - PasswordService: encode
    - TokenService: sign

-------------------------------------------------------------------------------
FLOW
-------------------------------------------------------------------------------
1) Login existente?  FAILED -> LOOKUP_FAILED, FOUND -> LOGIN_TAKEN
2) Email existente?  FAILED -> LOOKUP_FAILED, FOUND -> EMAIL_TAKEN
3) Hashear password  error  -> HASHING_FAILED
4) store_with_user   error  -> STORAGE_FAILED
5) Firmar token con el login ORIGINAL -> TOKEN_SIGNING_FAILED
===============================================================================
"""

from __future__ import annotations

from ....context import ExecutionContext
from ....crosscutting.exceptions import (
    OperationCancelled,
    PasswordHashingError,
    RepositoryError,
)
from ....domain.entities import Auth, User
from ....domain.repositories import AuthRepository, UserRepository
from ....domain.services import PasswordService, TokenService
from .auth_results import AuthErrorCode, AuthResult, auth_failure
from .auth_utils import (
    MSG_EMAIL_TAKEN,
    MSG_HASHING_FAILED,
    MSG_LOGIN_TAKEN,
    MSG_STORAGE_FAILED,
    cancelled_error,
    lookup_error,
    sign_login_token,
)


class SignUpUseCase:
    """Orquesta el alta de credencial + perfil y la emisión del primer token."""

    def __init__(
        self,
        auth_repository: AuthRepository,
        user_repository: UserRepository,
        password_service: PasswordService,
        token_service: TokenService,
    ) -> None:
        self._credentials = auth_repository
        self._users = user_repository
        self._passwords = password_service
        self._tokens = token_service

    def execute(self, ctx: ExecutionContext, auth: Auth, user: User) -> AuthResult:
        try:
            return self._sign_up(ctx, auth, user)
        except OperationCancelled:
            return AuthResult(error=cancelled_error())

    def _sign_up(self, ctx: ExecutionContext, auth: Auth, user: User) -> AuthResult:
        # 1) Unicidad de login.
        existing_auth = self._credentials.get_by_login(ctx, auth.login)
        if existing_auth.is_failed:
            return AuthResult(error=lookup_error(existing_auth, "credential"))
        if existing_auth.is_found:
            return auth_failure(AuthErrorCode.LOGIN_TAKEN, MSG_LOGIN_TAKEN)

        # 2) Unicidad de email.
        existing_user = self._users.get_by_email(ctx, user.email)
        if existing_user.is_failed:
            return AuthResult(error=lookup_error(existing_user, "user"))
        if existing_user.is_found:
            return auth_failure(AuthErrorCode.EMAIL_TAKEN, MSG_EMAIL_TAKEN)

        # 3) Hash del password (el plaintext no sale de acá).
        try:
            hashed = self._passwords.encode(ctx, auth.password)
        except PasswordHashingError:
            return auth_failure(AuthErrorCode.HASHING_FAILED, MSG_HASHING_FAILED)

        # 4) Escritura atómica credencial + perfil.
        try:
            self._credentials.store_with_user(
                ctx, Auth(login=auth.login, password=hashed), user
            )
        except RepositoryError:
            return auth_failure(AuthErrorCode.STORAGE_FAILED, MSG_STORAGE_FAILED)

        # 5) Token para el login original.
        return sign_login_token(ctx, self._tokens, auth.login)
