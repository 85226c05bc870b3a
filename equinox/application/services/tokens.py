# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless HS256 bearer tokens.

A token is ``base64url(header).base64url(claims).base64url(signature)`` where
the signature is HMAC-SHA256 over the first two segments. Nothing is stored
server side; the signature is the only trust anchor.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import json
import time
from collections.abc import Callable
from typing import Any

from equinox.domain.users.entities import TokenClaims, UserIdentity
from equinox.domain.users.exceptions import (
    InvalidAudienceOrIssuerError,
    InvalidPayloadError,
    InvalidSignatureError,
    MalformedTokenError,
    TokenExpiredError,
)
from equinox.shared.config.settings import DEFAULT_TOKEN_TTL_SECONDS

TOKEN_AUDIENCE = "equinox"
TOKEN_ISSUER = "equinox-server"
TOKEN_HEADER = {"alg": "HS256", "typ": "JWT"}


def base64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def base64url_decode(segment: str) -> bytes:
    padding = "=" * (-len(segment) % 4)
    return base64.urlsafe_b64decode(segment + padding)


def _encode_json(obj: dict[str, Any]) -> str:
    return base64url_encode(json.dumps(obj, separators=(",", ":")).encode("utf-8"))


class TokenService:
    def __init__(
        self,
        secret: str | bytes,
        *,
        ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not secret:
            raise ValueError("token signing secret must not be empty")
        self._secret = secret.encode("utf-8") if isinstance(secret, str) else secret
        self._ttl_seconds = ttl_seconds
        self._clock = clock

    def _now(self) -> int:
        return int(self._clock())

    def _sign(self, signing_input: str) -> str:
        digest = hmac.new(self._secret, signing_input.encode("utf-8"), hashlib.sha256).digest()
        return base64url_encode(digest)

    def build_claims(self, identity: UserIdentity) -> TokenClaims:
        return TokenClaims(
            sub=identity.id,
            username=identity.username,
            aud=TOKEN_AUDIENCE,
            iss=TOKEN_ISSUER,
            exp=self._now() + self._ttl_seconds,
        )

    def encode(self, claims: dict[str, Any]) -> str:
        """Sign arbitrary claims. ``issue`` is the normal entry point."""
        signing_input = f"{_encode_json(TOKEN_HEADER)}.{_encode_json(claims)}"
        return f"{signing_input}.{self._sign(signing_input)}"

    def issue(self, identity: UserIdentity) -> str:
        return self.encode(self.build_claims(identity).to_dict())

    def verify(self, token: str) -> UserIdentity:
        segments = token.split(".")
        if len(segments) != 3:
            raise MalformedTokenError()

        encoded_header, encoded_claims, provided_signature = segments
        expected = self._sign(f"{encoded_header}.{encoded_claims}").encode("ascii")
        provided = provided_signature.encode("utf-8")
        if len(expected) != len(provided) or not hmac.compare_digest(expected, provided):
            raise InvalidSignatureError()

        try:
            claims = json.loads(base64url_decode(encoded_claims).decode("utf-8"))
        except (binascii.Error, UnicodeDecodeError, ValueError) as exc:
            raise MalformedTokenError() from exc
        if not isinstance(claims, dict):
            raise MalformedTokenError()

        exp = claims.get("exp")
        if isinstance(exp, (int, float)) and not isinstance(exp, bool) and exp < self._now():
            raise TokenExpiredError()

        if claims.get("aud") != TOKEN_AUDIENCE or claims.get("iss") != TOKEN_ISSUER:
            raise InvalidAudienceOrIssuerError()

        sub = claims.get("sub")
        username = claims.get("username")
        if not isinstance(sub, str) or not isinstance(username, str):
            raise InvalidPayloadError()

        return UserIdentity(id=sub, username=username)


__all__ = [
    "TOKEN_AUDIENCE",
    "TOKEN_HEADER",
    "TOKEN_ISSUER",
    "TokenService",
    "base64url_decode",
    "base64url_encode",
]
