# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

from equinox.shared.config import load_config
from equinox.shared.logging import logger

from .base import AppError

_HTTP_MESSAGES = {
    HTTPStatus.NOT_FOUND: "Not found",
    HTTPStatus.METHOD_NOT_ALLOWED: "Method not allowed",
    HTTPStatus.REQUEST_ENTITY_TOO_LARGE: "Payload too large",
    HTTPStatus.BAD_REQUEST: "Bad request",
}


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    response = jsonify(error.to_dict())
    return response, error.status


def handle_http_exception(exc: HTTPException) -> tuple[Response, int]:
    status = exc.code or HTTPStatus.INTERNAL_SERVER_ERROR
    response = jsonify({"error": _HTTP_MESSAGES.get(status, exc.name)})
    for key, value in exc.get_headers():
        if key.lower() == "allow":
            response.headers["Allow"] = value
    return response, status


def register_error_handler(
    app: Flask,
    *,
    debug_mode: bool | None = None,
    default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
) -> None:
    if debug_mode is None:
        debug_mode = load_config().debug_logging

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        logger.warning(
            f"Handled application error {exc.code} on {request.method} {request.path}"
        )
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        if exc.code is None or exc.code < 400:
            return exc
        return handle_http_exception(exc)

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        ip_address = (
            request.headers.get("X-Forwarded-For", "").split(",")[0].strip()
            or request.remote_addr
            or "unknown"
        )

        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"from {ip_address}, query={dict(request.args)}"
            )
        else:
            logger.error(f"Error: {type(exc).__name__} on {request.method} {request.path}")

        response = jsonify({"error": "internal_error"})
        return response, default_status
