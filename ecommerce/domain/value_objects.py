# =============================================================================
# FILE: domain/value_objects.py
# =============================================================================
"""
===============================================================================
DOMAIN: Value Objects (Immutable Domain Primitives)
===============================================================================

Contenido:
    - LookupStatus / Lookup: resultado explícito de una búsqueda por clave
      (FOUND | NOT_FOUND | FAILED), en lugar del par (valor|None, error).

Principios:
    - Inmutabilidad (frozen dataclasses)
    - Validación en constructor
    - Equality por valor
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class LookupStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class Lookup(Generic[T]):
    """
    Resultado tri-estado de una búsqueda en un repositorio.

    Contrato:
      - FOUND     => value presente, error None
      - NOT_FOUND => value None, error None
      - FAILED    => value None, error presente (backend no disponible, etc.)
    """

    status: LookupStatus
    value: T | None = None
    error: Exception | None = None

    def __post_init__(self) -> None:
        if self.status is LookupStatus.FOUND and self.value is None:
            raise ValueError("FOUND lookup requires a value")
        if self.status is LookupStatus.FAILED and self.error is None:
            raise ValueError("FAILED lookup requires an error")
        if self.status is not LookupStatus.FOUND and self.value is not None:
            raise ValueError(f"{self.status.value} lookup cannot carry a value")

    @classmethod
    def found(cls, value: T) -> "Lookup[T]":
        return cls(status=LookupStatus.FOUND, value=value)

    @classmethod
    def not_found(cls) -> "Lookup[T]":
        return cls(status=LookupStatus.NOT_FOUND)

    @classmethod
    def failed(cls, error: Exception) -> "Lookup[T]":
        return cls(status=LookupStatus.FAILED, error=error)

    @property
    def is_found(self) -> bool:
        return self.status is LookupStatus.FOUND

    @property
    def is_not_found(self) -> bool:
        return self.status is LookupStatus.NOT_FOUND

    @property
    def is_failed(self) -> bool:
        return self.status is LookupStatus.FAILED
