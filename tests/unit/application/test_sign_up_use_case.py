"""
Name: Sign Up Use Case Unit Tests

Responsibilities:
  - Test SignUpUseCase orchestration logic
  - Verify login/email uniqueness pre-checks short-circuit the flow
  - Verify only the hashed password reaches storage
"""

import pytest

from ecommerce.application.usecases.auth import AuthErrorCode, SignUpUseCase
from ecommerce.crosscutting.exceptions import (
    DuplicateError,
    OperationCancelled,
    PasswordHashingError,
    RepositoryError,
    TokenSigningError,
)
from ecommerce.domain.entities import Auth, TokenInfo, User
from ecommerce.domain.value_objects import Lookup

pytestmark = pytest.mark.unit


@pytest.fixture
def use_case(
    mock_auth_repository,
    mock_user_repository,
    mock_password_service,
    mock_token_service,
):
    return SignUpUseCase(
        auth_repository=mock_auth_repository,
        user_repository=mock_user_repository,
        password_service=mock_password_service,
        token_service=mock_token_service,
    )


def test_check_login_exists_error(
    use_case, ctx, valid_auth, valid_user, mock_auth_repository, mock_user_repository
):
    mock_auth_repository.get_by_login.return_value = Lookup.failed(
        RepositoryError("error message")
    )

    result = use_case.execute(ctx, valid_auth, valid_user)

    assert result.error.code == AuthErrorCode.LOOKUP_FAILED
    mock_user_repository.get_by_email.assert_not_called()


def test_login_already_exists_never_touches_user_repository(
    use_case,
    ctx,
    valid_auth,
    valid_user,
    mock_auth_repository,
    mock_user_repository,
    mock_password_service,
):
    mock_auth_repository.get_by_login.return_value = Lookup.found(
        Auth(login="valid login", password="valid password")
    )

    result = use_case.execute(ctx, valid_auth, valid_user)

    assert result.token is None
    assert result.error.code == AuthErrorCode.LOGIN_TAKEN
    assert result.error.message == "login already taken"
    mock_user_repository.get_by_email.assert_not_called()
    mock_password_service.encode.assert_not_called()
    mock_auth_repository.store_with_user.assert_not_called()


def test_check_user_exists_error(
    use_case, ctx, valid_auth, valid_user, mock_user_repository, mock_auth_repository
):
    mock_user_repository.get_by_email.return_value = Lookup.failed(
        RepositoryError("error message")
    )

    result = use_case.execute(ctx, valid_auth, valid_user)

    assert result.error.code == AuthErrorCode.LOOKUP_FAILED
    mock_user_repository.get_by_email.assert_called_once_with(ctx, "user email")
    mock_auth_repository.store_with_user.assert_not_called()


def test_user_already_exists_never_stores(
    use_case,
    ctx,
    valid_auth,
    valid_user,
    mock_user_repository,
    mock_auth_repository,
    mock_password_service,
):
    mock_user_repository.get_by_email.return_value = Lookup.found(valid_user)

    result = use_case.execute(ctx, valid_auth, valid_user)

    assert result.error.code == AuthErrorCode.EMAIL_TAKEN
    assert result.error.message == "email already registered"
    mock_password_service.encode.assert_not_called()
    mock_auth_repository.store_with_user.assert_not_called()


def test_hashing_failure_never_stores(
    use_case,
    ctx,
    valid_auth,
    valid_user,
    mock_password_service,
    mock_auth_repository,
):
    mock_password_service.encode.side_effect = PasswordHashingError("boom")

    result = use_case.execute(ctx, valid_auth, valid_user)

    assert result.error.code == AuthErrorCode.HASHING_FAILED
    mock_auth_repository.store_with_user.assert_not_called()


def test_store_user_error(
    use_case, ctx, valid_auth, valid_user, mock_auth_repository, mock_token_service
):
    mock_auth_repository.store_with_user.side_effect = RepositoryError("error message")

    result = use_case.execute(ctx, valid_auth, valid_user)

    assert result.error.code == AuthErrorCode.STORAGE_FAILED
    mock_token_service.sign.assert_not_called()


def test_storage_uniqueness_violation_is_storage_failure(
    use_case, ctx, valid_auth, valid_user, mock_auth_repository
):
    # Otro sign-up ganó la carrera entre el pre-check y la escritura.
    mock_auth_repository.store_with_user.side_effect = DuplicateError("dup")

    result = use_case.execute(ctx, valid_auth, valid_user)

    assert result.error.code == AuthErrorCode.STORAGE_FAILED


def test_stores_hashed_password_never_plaintext(
    use_case, ctx, valid_auth, valid_user, mock_auth_repository, mock_password_service
):
    use_case.execute(ctx, valid_auth, valid_user)

    mock_password_service.encode.assert_called_once_with(ctx, "valid password")
    mock_auth_repository.store_with_user.assert_called_once_with(
        ctx, Auth(login="valid login", password="hashed password"), valid_user
    )
    stored_auth = mock_auth_repository.store_with_user.call_args.args[1]
    assert stored_auth.password != valid_auth.password


def test_sign_token_error(use_case, ctx, valid_auth, valid_user, mock_token_service):
    mock_token_service.sign.side_effect = TokenSigningError("error message")

    result = use_case.execute(ctx, valid_auth, valid_user)

    assert result.token is None
    assert result.error.code == AuthErrorCode.TOKEN_SIGNING_FAILED


def test_success(use_case, ctx, valid_user, mock_token_service):
    result = use_case.execute(
        ctx, Auth(login="valid login", password="valid password"), valid_user
    )

    assert result.ok
    assert result.token == "valid token"
    mock_token_service.sign.assert_called_once_with(
        ctx, TokenInfo(info="valid login"), 43200
    )


def test_cancelled_while_storing(
    use_case, ctx, valid_auth, valid_user, mock_auth_repository, mock_token_service
):
    mock_auth_repository.store_with_user.side_effect = OperationCancelled("stop")

    result = use_case.execute(ctx, valid_auth, valid_user)

    assert result.error.code == AuthErrorCode.CANCELLED
    mock_token_service.sign.assert_not_called()


def test_forwards_context_to_every_collaborator(
    use_case,
    ctx,
    valid_auth,
    valid_user,
    mock_auth_repository,
    mock_user_repository,
    mock_password_service,
    mock_token_service,
):
    use_case.execute(ctx, valid_auth, valid_user)

    for call in (
        mock_auth_repository.get_by_login.call_args,
        mock_user_repository.get_by_email.call_args,
        mock_password_service.encode.call_args,
        mock_auth_repository.store_with_user.call_args,
        mock_token_service.sign.call_args,
    ):
        assert call.args[0] is ctx


def test_empty_profile_fields_are_passed_through(
    use_case, ctx, valid_auth, mock_auth_repository
):
    user = User(email="only@email")

    use_case.execute(ctx, valid_auth, user)

    assert mock_auth_repository.store_with_user.call_args.args[2] is user
