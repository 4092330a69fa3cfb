"""
Name: Execution Context Tests

Responsibilities:
  - Cancellation and deadline semantics
  - request_id binding for log correlation
"""

from datetime import datetime, timedelta, timezone

import pytest

from ecommerce.context import (
    ExecutionContext,
    bind_request_context,
    clear_context,
    get_context_dict,
    request_scope,
)
from ecommerce.crosscutting.exceptions import OperationCancelled

pytestmark = pytest.mark.unit


def test_background_context_is_live():
    ctx = ExecutionContext.background()

    assert not ctx.cancelled
    assert not ctx.expired()
    ctx.raise_if_done()


def test_cancel_is_observed():
    ctx = ExecutionContext.background()
    ctx.cancel()

    assert ctx.cancelled
    with pytest.raises(OperationCancelled):
        ctx.raise_if_done()


def test_deadline_is_observed():
    deadline = datetime(2026, 1, 1, tzinfo=timezone.utc)
    ctx = ExecutionContext(request_id="req-1", deadline=deadline)

    assert not ctx.expired(deadline - timedelta(seconds=1))
    with pytest.raises(OperationCancelled):
        ctx.raise_if_done(deadline)


def test_with_timeout_sets_future_deadline():
    ctx = ExecutionContext.with_timeout(30, request_id="req-2")

    assert ctx.request_id == "req-2"
    assert ctx.deadline > datetime.now(timezone.utc)


def test_request_id_binding():
    bind_request_context(ExecutionContext(request_id="req-42"))
    try:
        assert get_context_dict() == {"request_id": "req-42"}
    finally:
        clear_context()

    assert get_context_dict() == {}


def test_request_scope_restores_previous_binding():
    bind_request_context(ExecutionContext(request_id="outer"))
    try:
        with request_scope(ExecutionContext(request_id="inner")):
            assert get_context_dict() == {"request_id": "inner"}
        assert get_context_dict() == {"request_id": "outer"}
    finally:
        clear_context()
