"""
===============================================================================
TARJETA CRC — ecommerce/context.py (Contexto de ejecución por request)
===============================================================================

Responsabilidades:
  - Modelar el contexto de ejecución que viaja por cada llamada a
    colaboradores (request_id, deadline, cancelación).
  - Mantener contexto “request-scoped” usando ContextVars (async-safe) para
    correlacionar logs sin pasar parámetros por todo el stack.
  - Proveer helpers mínimos: bind_request_context(), request_scope(),
    get_context_dict(), clear_context().

Colaboradores:
  - application/usecases/auth: reenvían ExecutionContext a cada colaborador.
  - infrastructure/*: respetan la cancelación (raise_if_done()).
  - crosscutting/logger.py: enriquece logs leyendo get_context_dict().

Restricciones:
  - El caso de uso NO impone timeouts propios: solo reenvía el contexto.
  - ContextVars guardan solo strings (defaults vacíos para simplificar JSON).
===============================================================================
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Final, Iterator
from uuid import uuid4

from .crosscutting.exceptions import OperationCancelled

# Identificador de request (idealmente UUID o ID estable).
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

_CTX_REQUEST_ID: Final[str] = "request_id"


@dataclass(frozen=True)
class ExecutionContext:
    """
    Contexto portador de cancelación/deadline.

    Notas:
      - deadline en UTC; None significa “sin límite”.
      - El Event es compartido entre copias del contexto (cancelar una cancela
        todas las que deriven del mismo request).
    """

    request_id: str = field(default_factory=lambda: str(uuid4()))
    deadline: datetime | None = None
    _cancel_event: threading.Event = field(
        default_factory=threading.Event, repr=False, compare=False
    )

    @classmethod
    def background(cls) -> "ExecutionContext":
        """Contexto raíz sin deadline (tests, jobs, scripts)."""
        return cls()

    @classmethod
    def with_timeout(
        cls, seconds: float, *, request_id: str | None = None
    ) -> "ExecutionContext":
        deadline = datetime.now(timezone.utc) + timedelta(seconds=seconds)
        if request_id:
            return cls(request_id=request_id, deadline=deadline)
        return cls(deadline=deadline)

    def cancel(self) -> None:
        self._cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def expired(self, now: datetime | None = None) -> bool:
        if self.deadline is None:
            return False
        current = now or datetime.now(timezone.utc)
        return current >= self.deadline

    def raise_if_done(self, now: datetime | None = None) -> None:
        """Lanza OperationCancelled si el contexto fue cancelado o expiró."""
        if self.cancelled:
            raise OperationCancelled("Operation cancelled by caller.")
        if self.expired(now):
            raise OperationCancelled("Operation deadline exceeded.")


# =============================================================================
# API pública (usada por logger / adaptadores)
# =============================================================================


def bind_request_context(ctx: ExecutionContext) -> None:
    """Publica el request_id del contexto para correlación de logs."""
    request_id_var.set(ctx.request_id or "")


def get_context_dict() -> dict[str, str]:
    """Devuelve el contexto actual como dict, omitiendo claves vacías."""
    ctx: dict[str, str] = {}
    if val := request_id_var.get():
        ctx[_CTX_REQUEST_ID] = val
    return ctx


def clear_context() -> None:
    """Limpia el contexto al final del request/job."""
    request_id_var.set("")


@contextmanager
def request_scope(ctx: ExecutionContext) -> Iterator[ExecutionContext]:
    """
    Publica el request_id mientras dura una operación y restaura el valor
    previo al salir (anidable).
    """
    token = request_id_var.set(ctx.request_id or "")
    try:
        yield ctx
    finally:
        request_id_var.reset(token)
