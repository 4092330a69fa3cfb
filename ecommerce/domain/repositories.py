"""
CRC — domain/repositories.py

Name
- Domain Repository Interfaces (Protocols)

Responsibilities
- Define persistence contracts for the auth domain (ports).
- Keep the application/domain independent from infrastructure.
- Enable dependency inversion and straightforward unit testing (mock/stub repositories).

Collaborators
- domain.entities: Auth, User, ResetCode
- domain.value_objects: Lookup
- infrastructure.repositories: in_memory implementations

Constraints
- Pure interfaces only: no side effects, no infrastructure imports.
- Every method takes the ExecutionContext first and must honor cancellation.
- Lookups never raise for "not found" or backend failures: they return a Lookup.
- Writes raise RepositoryError (or DuplicateError) on failure.
"""

from datetime import datetime
from typing import Protocol

from ..context import ExecutionContext
from .entities import Auth, ResetCode, User
from .value_objects import Lookup


class AuthRepository(Protocol):
    """
    R: Interface for credential persistence, keyed by login identifier.

    Implementations must guarantee login uniqueness at the storage level;
    the use case pre-check is advisory.
    """

    def get_by_login(self, ctx: ExecutionContext, login: str) -> Lookup[Auth]:
        """R: Load the stored credential (password is the hash)."""
        ...

    def store_with_user(self, ctx: ExecutionContext, auth: Auth, user: User) -> None:
        """
        R: Atomically store a credential together with its user profile.

        Either both records are written or neither is.
        """
        ...

    def update_password(
        self, ctx: ExecutionContext, login: str, password_hash: str
    ) -> None:
        """R: Replace the stored hash for an existing login."""
        ...


class UserRepository(Protocol):
    """R: Interface for user profile lookups, keyed by email."""

    def get_by_email(self, ctx: ExecutionContext, email: str) -> Lookup[User]: ...


class ResetCodeRepository(Protocol):
    """R: Interface for forgot-password code persistence (one live code per login)."""

    def store(self, ctx: ExecutionContext, reset_code: ResetCode) -> None:
        """R: Persist a code, superseding any previous code of the same login."""
        ...

    def get_by_login(self, ctx: ExecutionContext, login: str) -> Lookup[ResetCode]: ...

    def consume(
        self, ctx: ExecutionContext, login: str, code_hash: str, now: datetime
    ) -> bool:
        """
        R: Redeem the current code of the login (compare-and-set).

        Returns True only when the code is live at `now` and its hash matches;
        the code is then marked used in the same atomic step, so at most one
        caller can redeem it. A mismatch spends one of its attempts.
        Raises RepositoryError if the storage cannot be updated.
        """
        ...
