# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, Response
from flask_cors import CORS

from equinox.infrastructure.container import Container
from equinox.shared.config import AppConfig, load_config
from equinox.shared.logging import logger, setup_logging
from equinox.shared.middleware.error_handler import configure_error_handling
from equinox.shared.middleware.request_logger import configure_request_logging

ALLOWED_METHODS = ["GET", "POST", "OPTIONS"]
ALLOWED_HEADERS = ["Content-Type", "Authorization"]


def create_app(config: AppConfig | None = None, *, container: Container | None = None) -> Flask:
    config = config or load_config()
    container = container or Container(config)
    setup_logging(debug_mode=config.debug_logging)

    app = Flask(__name__)
    app.config.update(
        MAX_CONTENT_LENGTH=config.server.max_body_bytes,
    )
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    CORS(
        app,
        origins=[config.security.client_origin],
        methods=ALLOWED_METHODS,
        allow_headers=ALLOWED_HEADERS,
        max_age=600,
        vary_header=True,
    )
    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())

    # Built eagerly so a missing JWT_SECRET is reported at startup.
    _ = container.token_service

    @app.after_request
    def _add_security_headers(resp: Response) -> Response:
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("X-DNS-Prefetch-Control", "off")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-XSS-Protection", "0")
        resp.headers.setdefault("Permissions-Policy", "geolocation=(self)")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )

        return resp

    logger.info(f"Flask app initialized env={config.app_env}")
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    logger.info(
        f"Equinox Notes server listening on http://{config.server.host}:{config.server.port}"
    )
    app.run(host=config.server.host, port=config.server.port, debug=config.debug_logging)


if __name__ == "__main__":
    main()
