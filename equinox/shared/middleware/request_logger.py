# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hashlib
import secrets
import time

from flask import Flask, Response, g, request

from equinox.shared.config import load_config
from equinox.shared.logging import clear_correlation_id, logger, set_correlation_id

_SENSITIVE_HEADERS = {"authorization", "cookie", "x-api-key", "x-auth-token"}


def _get_client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()

    return request.remote_addr or "unknown"


def _get_user_id() -> str | None:
    return getattr(g, "user_id", None)


def _sanitize_headers(headers: dict[str, str]) -> dict[str, str]:
    sanitized = {}
    for key, value in headers.items():
        if key.lower() in _SENSITIVE_HEADERS:
            sanitized[key] = f"<hashed:{hashlib.sha256(value.encode()).hexdigest()[:8]}>"
        else:
            sanitized[key] = value

    return sanitized


def _log_request_start(debug_mode: bool) -> None:
    ip_address = _get_client_ip()

    if debug_mode:
        headers = _sanitize_headers(dict(request.headers))
        logger.debug(
            f"Request started: {request.method} {request.path} "
            f"from {ip_address}, headers={headers}, "
            f"body_size={request.content_length or 0}"
        )
    else:
        logger.debug(f"Request: {request.method} {request.path} from {ip_address}")


def _log_request_end(response: Response, start_time: float) -> None:
    duration_ms = (time.perf_counter() - start_time) * 1000.0
    user_id = _get_user_id()
    suffix = f" user={user_id}" if user_id else ""
    logger.info(
        f"{request.method} {request.path} -> {response.status_code} "
        f"({duration_ms:.1f}ms){suffix}"
    )


def configure_request_logging(app: Flask, *, debug_mode: bool | None = None) -> None:
    if debug_mode is None:
        debug_mode = load_config().debug_logging

    @app.before_request
    def _before_request() -> None:
        correlation_id = request.headers.get("X-Request-ID") or secrets.token_urlsafe(8)
        set_correlation_id(correlation_id)
        g.correlation_id = correlation_id
        g.request_start_time = time.perf_counter()

        _log_request_start(debug_mode)

    @app.after_request
    def _after_request(response: Response) -> Response:
        start_time = getattr(g, "request_start_time", time.perf_counter())
        _log_request_end(response, start_time)
        correlation_id = getattr(g, "correlation_id", None)
        if correlation_id:
            response.headers.setdefault("X-Request-ID", correlation_id)
        return response

    @app.teardown_request
    def _teardown_request(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(
                f"Request error: {type(exc).__name__} on "
                f"{request.method} {request.path}"
            )

        clear_correlation_id()


__all__ = ["configure_request_logging"]
