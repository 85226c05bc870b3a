from __future__ import annotations

import pytest

from equinox.application.services.tokens import TokenService
from equinox.application.use_cases.users.get_current_user import (
    GetCurrentUserUseCase, extract_bearer_token)
from equinox.application.use_cases.users.sign_in_user import SignInUserUseCase
from equinox.domain.users.entities import Credentials, UserIdentity
from equinox.domain.users.exceptions import (InvalidSignatureError,
                                             MissingBearerTokenError)


def test_sign_in_derives_identity_and_token(token_service: TokenService) -> None:
    use_case = SignInUserUseCase(tokens=token_service)

    result = use_case.execute(Credentials(username="alice", password="secret123"))

    assert result.user == UserIdentity.from_username("alice")
    assert token_service.verify(result.token) == result.user


def test_same_username_same_id_regardless_of_password(token_service: TokenService) -> None:
    use_case = SignInUserUseCase(tokens=token_service)

    first = use_case.execute(Credentials(username="alice", password="secret123"))
    second = use_case.execute(Credentials(username="alice", password="different1"))

    assert first.user.id == second.user.id
    assert first.token == second.token


def test_current_user_from_header(token_service: TokenService) -> None:
    token = token_service.issue(UserIdentity.from_username("bob"))
    use_case = GetCurrentUserUseCase(tokens=token_service)

    assert use_case.execute(f"Bearer {token}") == UserIdentity.from_username("bob")


@pytest.mark.parametrize("header", [None, "", "Bearer", "Bearer ", "Bearer    ", "bearer abc", "Basic abc"])
def test_missing_or_foreign_scheme(header: str | None) -> None:
    with pytest.raises(MissingBearerTokenError):
        extract_bearer_token(header)


def test_extract_strips_whitespace() -> None:
    assert extract_bearer_token("Bearer  abc.def.ghi ") == "abc.def.ghi"


def test_current_user_propagates_token_errors(token_service: TokenService) -> None:
    use_case = GetCurrentUserUseCase(tokens=token_service)

    with pytest.raises(InvalidSignatureError):
        use_case.execute("Bearer a.b.c")
