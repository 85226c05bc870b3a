# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.message or self.code}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code=cast(str, getattr(self, "code", "domain_error")),
            status=cast(HTTPStatus, getattr(self, "status", HTTPStatus.BAD_REQUEST)),
        )


class ValidationError(AppError):
    def __init__(
        self,
        code: str = "validation_error",
        *,
        context: Mapping[str, Any] | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.BAD_REQUEST,
            context=context,
            message=message,
        )


class CredentialsValidationError(ValidationError):
    """Per-field credential violations, returned to the caller verbatim."""

    def __init__(self, errors: Mapping[str, Sequence[str]]) -> None:
        super().__init__(
            code="invalid_credentials_payload",
            context={field: list(messages) for field, messages in errors.items()},
        )

    @property
    def errors(self) -> dict[str, list[str]]:
        return {field: list(messages) for field, messages in (self.context or {}).items()}

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.errors}


class InvalidJsonBodyError(ValidationError):
    def __init__(self) -> None:
        super().__init__(code="invalid_json_body", message="Invalid JSON body")
