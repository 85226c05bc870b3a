from __future__ import annotations

from pydantic import BaseModel

from equinox.application.use_cases.users.sign_in_user import AuthResult
from equinox.domain.users.entities import UserIdentity


class UserDTO(BaseModel):
    id: str
    username: str

    @classmethod
    def from_identity(cls, identity: UserIdentity) -> UserDTO:
        return cls(id=identity.id, username=identity.username)


class AuthSuccessDTO(BaseModel):
    token: str
    user: UserDTO

    @classmethod
    def from_result(cls, result: AuthResult) -> AuthSuccessDTO:
        return cls(token=result.token, user=UserDTO.from_identity(result.user))


class CurrentUserDTO(BaseModel):
    user: UserDTO


class HealthDTO(BaseModel):
    status: str = "ok"
