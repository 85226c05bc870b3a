# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections.abc import Callable
from functools import cached_property

from equinox.application.services.tokens import TokenService
from equinox.application.use_cases.users.get_current_user import \
    GetCurrentUserUseCase
from equinox.application.use_cases.users.sign_in_user import \
    SignInUserUseCase
from equinox.interfaces.http.controllers.auth_controller import AuthController
from equinox.interfaces.http.controllers.misc_controller import MiscController
from equinox.shared.config import AppConfig
from equinox.shared.logging import logger


class Container:
    def __init__(self, config: AppConfig, *, clock: Callable[[], float] = time.time) -> None:
        self._config = config
        self._clock = clock

    @cached_property
    def token_service(self) -> TokenService:
        if self._config.uses_dev_secret():
            logger.warning(
                "JWT_SECRET is not set; signing tokens with the development default. "
                "Tokens are forgeable, never run this way in production."
            )
        return TokenService(
            self._config.signing_secret,
            ttl_seconds=self._config.token_ttl_seconds,
            clock=self._clock,
        )

    @cached_property
    def sign_in_user_use_case(self) -> SignInUserUseCase:
        return SignInUserUseCase(tokens=self.token_service)

    @cached_property
    def get_current_user_use_case(self) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(tokens=self.token_service)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            sign_in_use_case=self.sign_in_user_use_case,
            current_user_use_case=self.get_current_user_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()
