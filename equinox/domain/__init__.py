# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .users.entities import Credentials, TokenClaims, UserIdentity
from .users.exceptions import (
    InvalidAudienceOrIssuerError,
    InvalidPayloadError,
    InvalidSignatureError,
    MalformedTokenError,
    MissingBearerTokenError,
    TokenError,
    TokenExpiredError,
)

__all__ = [
    "Credentials",
    "TokenClaims",
    "UserIdentity",
    "InvalidAudienceOrIssuerError",
    "InvalidPayloadError",
    "InvalidSignatureError",
    "MalformedTokenError",
    "MissingBearerTokenError",
    "TokenError",
    "TokenExpiredError",
]
