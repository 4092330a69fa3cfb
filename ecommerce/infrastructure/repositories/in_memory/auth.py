"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/auth.py
============================================================
Class: InMemoryAuthRepository

Responsibilities:
  - Almacenar credenciales y perfiles en memoria (tests / local dev).
  - Implementar AuthRepository y UserRepository sobre el mismo storage, de
    modo que store_with_user sea atómico (ambos o ninguno).
  - Garantizar unicidad de login y email bajo lock: es la defensa real
    contra sign-ups concurrentes (DuplicateError).

Collaborators:
  - domain.entities.Auth, User
  - domain.value_objects.Lookup
  - crosscutting.exceptions.DuplicateError / RepositoryError

Constraints / Notes:
  - Thread-safe: acceso protegido por Lock.
  - Repo puro: no hashea ni valida passwords; guarda lo que recibe.
  - Respeta cancelación del ExecutionContext antes de tocar el storage.
============================================================
"""

from __future__ import annotations

from dataclasses import replace
from threading import Lock
from typing import Dict

from ....context import ExecutionContext
from ....crosscutting.exceptions import DuplicateError, RepositoryError
from ....crosscutting.logger import logger
from ....domain.entities import Auth, User
from ....domain.value_objects import Lookup


class InMemoryAuthRepository:
    def __init__(self) -> None:
        self._lock = Lock()
        self._credentials: Dict[str, Auth] = {}
        self._users: Dict[str, User] = {}
        # login -> email, para mantener el vínculo credencial/perfil.
        self._owners: Dict[str, str] = {}

    # =========================================================
    # AuthRepository
    # =========================================================
    def get_by_login(self, ctx: ExecutionContext, login: str) -> Lookup[Auth]:
        ctx.raise_if_done()
        with self._lock:
            auth = self._credentials.get(login)
        return Lookup.found(auth) if auth is not None else Lookup.not_found()

    def store_with_user(self, ctx: ExecutionContext, auth: Auth, user: User) -> None:
        ctx.raise_if_done()
        with self._lock:
            if auth.login in self._credentials:
                raise DuplicateError(f"Login already exists: {auth.login}")
            if user.email in self._users:
                raise DuplicateError(f"Email already exists: {user.email}")
            self._credentials[auth.login] = replace(auth, confirm_password="")
            self._users[user.email] = user
            self._owners[auth.login] = user.email
        logger.info("Credential stored", extra={"login": auth.login})

    def update_password(
        self, ctx: ExecutionContext, login: str, password_hash: str
    ) -> None:
        ctx.raise_if_done()
        with self._lock:
            current = self._credentials.get(login)
            if current is None:
                raise RepositoryError(f"Credential not found: {login}")
            self._credentials[login] = replace(current, password=password_hash)
        logger.info("Credential password updated", extra={"login": login})

    # =========================================================
    # UserRepository
    # =========================================================
    def get_by_email(self, ctx: ExecutionContext, email: str) -> Lookup[User]:
        ctx.raise_if_done()
        with self._lock:
            user = self._users.get(email)
        return Lookup.found(user) if user is not None else Lookup.not_found()

    def user_for_login(self, login: str) -> User | None:
        """Helper de inspección (tests / dev): perfil asociado a un login."""
        with self._lock:
            email = self._owners.get(login)
            return self._users.get(email) if email is not None else None
