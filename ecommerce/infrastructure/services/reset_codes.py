"""
Name: Forgot-Password Code Adapters

Responsibilities:
  - Generate numeric one-time codes with a CSPRNG (secrets)
  - Record dispatched codes in an in-process outbox (tests / local dev)
  - Provide the system UTC clock

Collaborators:
  - domain.services: ResetCodeGenerator, ResetCodeSender, Clock
  - crosscutting.config: reset_code_length
  - crosscutting.logger

Notes:
  - The outbox stands in for an email/SMS provider. It never logs the code.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from datetime import datetime, timezone
from threading import Lock

from ...context import ExecutionContext
from ...crosscutting.config import get_settings
from ...crosscutting.logger import logger


class NumericResetCodeGenerator:
    """Códigos de N dígitos (ceros a la izquierda incluidos)."""

    def __init__(self, length: int | None = None) -> None:
        self._length = length or get_settings().reset_code_length
        if self._length <= 0:
            raise ValueError("length must be greater than 0")

    def generate(self) -> str:
        return "".join(str(secrets.randbelow(10)) for _ in range(self._length))


@dataclass(frozen=True, slots=True)
class SentResetCode:
    login: str
    code: str
    sent_at: datetime


class InMemoryResetCodeOutbox:
    """ResetCodeSender que guarda los mensajes en memoria."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._sent: list[SentResetCode] = []

    def send(self, ctx: ExecutionContext, login: str, code: str) -> None:
        ctx.raise_if_done()
        message = SentResetCode(
            login=login, code=code, sent_at=datetime.now(timezone.utc)
        )
        with self._lock:
            self._sent.append(message)
        logger.info("Reset code dispatched", extra={"login": login})

    @property
    def sent(self) -> list[SentResetCode]:
        with self._lock:
            return list(self._sent)

    def last_code_for(self, login: str) -> str | None:
        with self._lock:
            for message in reversed(self._sent):
                if message.login == login:
                    return message.code
        return None


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)
