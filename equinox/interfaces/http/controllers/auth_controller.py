# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from flask import Blueprint, Response, g, jsonify, request
from werkzeug.exceptions import BadRequest

from equinox.application.services.credentials import validate_credentials
from equinox.application.use_cases.users.get_current_user import \
    GetCurrentUserUseCase
from equinox.application.use_cases.users.sign_in_user import \
    SignInUserUseCase
from equinox.domain.users.exceptions import TokenError
from equinox.interfaces.http.dto.auth import (AuthSuccessDTO, CurrentUserDTO,
                                              UserDTO)
from equinox.shared.errors import InvalidJsonBodyError
from equinox.shared.logging import logger


def _read_json_body() -> Any:
    if not request.get_data(cache=True):
        return {}
    try:
        return request.get_json(force=True)
    except (BadRequest, RecursionError) as exc:
        raise InvalidJsonBodyError() from exc


class AuthController:
    def __init__(
        self,
        *,
        sign_in_use_case: SignInUserUseCase,
        current_user_use_case: GetCurrentUserUseCase,
    ) -> None:
        self._sign_in_use_case = sign_in_use_case
        self._current_user_use_case = current_user_use_case

    def _sign_in(self, action: str) -> tuple[Response, int]:
        credentials = validate_credentials(_read_json_body())
        result = self._sign_in_use_case.execute(credentials)
        g.user_id = result.user.id

        logger.info(f"auth.{action}: ok user_id={result.user.id}")
        return jsonify(AuthSuccessDTO.from_result(result).model_dump()), 200

    def register(self) -> tuple[Response, int]:
        return self._sign_in("register")

    def login(self) -> tuple[Response, int]:
        return self._sign_in("login")

    def me(self) -> tuple[Response, int]:
        try:
            user = self._current_user_use_case.execute(request.headers.get("Authorization"))
        except TokenError as exc:
            logger.warning(f"auth.me: rejected reason={exc.code}")
            raise

        g.user_id = user.id
        payload = CurrentUserDTO(user=UserDTO.from_identity(user))
        return jsonify(payload.model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/me", view_func=self.me, methods=["GET"])
        return bp
