# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from equinox.application.services.tokens import TokenService
from equinox.domain.users.entities import UserIdentity
from equinox.domain.users.exceptions import MissingBearerTokenError

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: str | None) -> str:
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise MissingBearerTokenError()
    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise MissingBearerTokenError()
    return token


class GetCurrentUserUseCase:
    def __init__(self, *, tokens: TokenService) -> None:
        self._tokens = tokens

    def execute(self, authorization: str | None) -> UserIdentity:
        return self._tokens.verify(extract_bearer_token(authorization))
