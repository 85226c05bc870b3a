# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass
from typing import Any

USER_ID_LENGTH = 16


@dataclass(slots=True, frozen=True)
class Credentials:
    """Normalized register/login input. Never persisted."""

    username: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password='***')"


@dataclass(slots=True, frozen=True)
class UserIdentity:

    id: str
    username: str

    @classmethod
    def from_username(cls, username: str) -> UserIdentity:
        digest = hashlib.sha256(username.encode("utf-8")).hexdigest()
        return cls(id=digest[:USER_ID_LENGTH], username=username)

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "username": self.username}


@dataclass(slots=True, frozen=True)
class TokenClaims:

    sub: str
    username: str
    aud: str
    iss: str
    exp: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
