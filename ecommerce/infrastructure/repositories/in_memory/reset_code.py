"""
In-memory ResetCodeRepository.

One code per login: storing a new code replaces the previous one, so only the
most recently issued code can be redeemed. Redemption is a compare-and-set
under the lock.
"""

from __future__ import annotations

import hmac
from dataclasses import replace
from datetime import datetime
from threading import Lock
from typing import Dict

from ....context import ExecutionContext
from ....crosscutting.logger import logger
from ....domain.entities import ResetCode
from ....domain.value_objects import Lookup


class InMemoryResetCodeRepository:
    def __init__(self) -> None:
        self._lock = Lock()
        self._codes: Dict[str, ResetCode] = {}

    def store(self, ctx: ExecutionContext, reset_code: ResetCode) -> None:
        ctx.raise_if_done()
        with self._lock:
            self._codes[reset_code.login] = reset_code

    def get_by_login(self, ctx: ExecutionContext, login: str) -> Lookup[ResetCode]:
        ctx.raise_if_done()
        with self._lock:
            reset_code = self._codes.get(login)
        if reset_code is None:
            return Lookup.not_found()
        return Lookup.found(reset_code)

    def consume(
        self, ctx: ExecutionContext, login: str, code_hash: str, now: datetime
    ) -> bool:
        ctx.raise_if_done()
        with self._lock:
            current = self._codes.get(login)
            if current is None or not current.is_live(now):
                return False
            if not hmac.compare_digest(current.code_hash, code_hash):
                self._codes[login] = replace(
                    current, attempts_left=current.attempts_left - 1
                )
                logger.warning(
                    "Reset code mismatch",
                    extra={"login": login, "attempts_left": current.attempts_left - 1},
                )
                return False
            self._codes[login] = replace(current, used_at=now)
        return True
