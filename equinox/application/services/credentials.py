# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Register/login payload validation.

Every rule for a field is evaluated and all violations are reported, so a
30 character username with a space gets both a length and a pattern message.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from equinox.domain.users.entities import Credentials
from equinox.shared.errors.base import CredentialsValidationError

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 24
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 72

USERNAME_PATTERN = re.compile(r"[A-Za-z0-9_]+")

# Unicode white space and line terminators. The C0 separators \x1c-\x1f
# and \x85 that str.strip() drops are kept, so they fail the pattern check.
TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def normalize_username(value: str) -> str:
    return value.strip(TRIM_CHARS)


def _username_errors(value: Any) -> list[str]:
    username = normalize_username(value) if isinstance(value, str) else ""
    if not username:
        return ["Username is required"]

    errors = []
    if len(username) < USERNAME_MIN_LENGTH:
        errors.append(f"Username must be at least {USERNAME_MIN_LENGTH} characters")
    if len(username) > USERNAME_MAX_LENGTH:
        errors.append(f"Username must be at most {USERNAME_MAX_LENGTH} characters")
    if not USERNAME_PATTERN.fullmatch(username):
        errors.append("Username must be alphanumeric or underscore")
    return errors


def _password_errors(value: Any) -> list[str]:
    password = value if isinstance(value, str) else ""
    if not password:
        return ["Password is required"]

    errors = []
    if len(password) < PASSWORD_MIN_LENGTH:
        errors.append(f"Password must be at least {PASSWORD_MIN_LENGTH} characters")
    if len(password) > PASSWORD_MAX_LENGTH:
        errors.append(f"Password must be at most {PASSWORD_MAX_LENGTH} characters")
    return errors


def collect_credential_errors(raw: Any) -> dict[str, list[str]]:
    """Return ``{field: [messages]}`` for every violated rule, empty when valid."""
    if not isinstance(raw, Mapping):
        raw = {}

    errors: dict[str, list[str]] = {}
    username_errors = _username_errors(raw.get("username"))
    if username_errors:
        errors["username"] = username_errors
    password_errors = _password_errors(raw.get("password"))
    if password_errors:
        errors["password"] = password_errors
    return errors


def validate_credentials(raw: Any) -> Credentials:
    errors = collect_credential_errors(raw)
    if errors:
        raise CredentialsValidationError(errors)
    return Credentials(username=normalize_username(raw["username"]), password=raw["password"])


__all__ = [
    "PASSWORD_MAX_LENGTH",
    "PASSWORD_MIN_LENGTH",
    "USERNAME_MAX_LENGTH",
    "USERNAME_MIN_LENGTH",
    "collect_credential_errors",
    "normalize_username",
    "validate_credentials",
]
