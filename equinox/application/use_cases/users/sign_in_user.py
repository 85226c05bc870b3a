# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from equinox.application.services.tokens import TokenService
from equinox.domain.users.entities import Credentials, UserIdentity


@dataclass(slots=True, frozen=True)
class AuthResult:

    token: str
    user: UserIdentity


class SignInUserUseCase:
    """Derive the user's identity from the username and issue a bearer token.

    There is no user store, so register and login both end up here.
    """

    def __init__(self, *, tokens: TokenService) -> None:
        self._tokens = tokens

    def execute(self, credentials: Credentials) -> AuthResult:
        user = UserIdentity.from_username(credentials.username)
        token = self._tokens.issue(user)
        return AuthResult(token=token, user=user)
