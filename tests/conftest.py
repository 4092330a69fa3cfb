"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Provide reusable test fixtures
  - Mock collaborators (repositories, password/token services, code sender)
  - Configure test environment

Collaborators:
  - pytest: Test framework
  - unittest.mock: Mocking library
  - ecommerce.domain: Entities and protocols

Notes:
  - Mocks use spec=<Protocol> so a typo in a port method fails loudly
  - Use @pytest.fixture(scope="function") for per-test isolation
"""

import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import Mock

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_JSON", "true")

from ecommerce.crosscutting import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None

from ecommerce.context import ExecutionContext  # noqa: E402
from ecommerce.domain.entities import Auth, User  # noqa: E402
from ecommerce.domain.repositories import (  # noqa: E402
    AuthRepository,
    ResetCodeRepository,
    UserRepository,
)
from ecommerce.domain.services import (  # noqa: E402
    Clock,
    PasswordService,
    ResetCodeGenerator,
    ResetCodeSender,
    TokenService,
)
from ecommerce.domain.value_objects import Lookup  # noqa: E402


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )


# ============================================================================
# Context / Entities
# ============================================================================


@pytest.fixture
def ctx() -> ExecutionContext:
    """R: Fresh, uncancelled execution context."""
    return ExecutionContext.background()


@pytest.fixture
def valid_auth() -> Auth:
    return Auth(login="valid login", password="valid password")


@pytest.fixture
def valid_user() -> User:
    return User(
        email="user email",
        first_name="user first name",
        last_name="user last name",
        phone_number="user phone number",
        address="user address",
    )


# ============================================================================
# Collaborator Mocks
# ============================================================================


@pytest.fixture
def mock_auth_repository() -> Mock:
    """R: AuthRepository mock; by default no credential exists."""
    mock = Mock(spec=AuthRepository)
    mock.get_by_login.return_value = Lookup.not_found()
    mock.store_with_user.return_value = None
    mock.update_password.return_value = None
    return mock


@pytest.fixture
def mock_user_repository() -> Mock:
    """R: UserRepository mock; by default no user exists."""
    mock = Mock(spec=UserRepository)
    mock.get_by_email.return_value = Lookup.not_found()
    return mock


@pytest.fixture
def mock_password_service() -> Mock:
    mock = Mock(spec=PasswordService)
    mock.encode.return_value = "hashed password"
    mock.matches.return_value = True
    return mock


@pytest.fixture
def mock_token_service() -> Mock:
    mock = Mock(spec=TokenService)
    mock.sign.return_value = "valid token"
    return mock


@pytest.fixture
def mock_reset_codes() -> Mock:
    mock = Mock(spec=ResetCodeRepository)
    mock.get_by_login.return_value = Lookup.not_found()
    return mock


@pytest.fixture
def mock_code_generator() -> Mock:
    mock = Mock(spec=ResetCodeGenerator)
    mock.generate.return_value = "123456"
    return mock


@pytest.fixture
def mock_code_sender() -> Mock:
    return Mock(spec=ResetCodeSender)


@pytest.fixture
def fixed_clock() -> Mock:
    mock = Mock(spec=Clock)
    mock.now.return_value = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)
    return mock


@pytest.fixture
def jwt_secret() -> str:
    return "test-secret-that-is-long-enough-for-hs256"
