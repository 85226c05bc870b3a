# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from equinox.shared.errors.base import DomainError

UNAUTHORIZED_MESSAGE = "Invalid or expired token"


class TokenError(DomainError):
    """Base for every bearer token rejection.

    Subclasses keep distinct codes for logs, but all of them render the same
    generic body so callers cannot tell expiry from a bad signature.
    """

    code = "invalid_token"
    status = HTTPStatus.UNAUTHORIZED

    def to_dict(self) -> dict[str, Any]:
        return {"error": UNAUTHORIZED_MESSAGE}


class MalformedTokenError(TokenError):
    code = "malformed_token"


class InvalidSignatureError(TokenError):
    code = "invalid_signature"


class TokenExpiredError(TokenError):
    code = "token_expired"


class InvalidAudienceOrIssuerError(TokenError):
    code = "invalid_audience_or_issuer"


class InvalidPayloadError(TokenError):
    code = "invalid_payload"


class MissingBearerTokenError(TokenError):
    code = "missing_bearer_token"
