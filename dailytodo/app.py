# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import os
import sys

from flask import Flask
from flask_cors import CORS

from dailytodo.infrastructure.admin_setup import setup_admin_user
from dailytodo.infrastructure.container import Container
from dailytodo.shared.config import AppConfig, load_config
from dailytodo.shared.errors import ConfigurationError, StoreUnavailableError
from dailytodo.shared.logging import logger, setup_logging
from dailytodo.shared.middleware.error_handler import configure_error_handling
from dailytodo.shared.middleware.request_logger import configure_request_logging


def _prepare_store(container: Container) -> None:
    config = container.config
    try:
        if config.database.auto_migrate:
            container.database.migrate()
        setup_admin_user(container.user_repository, config.admin_username)
    except StoreUnavailableError:
        # keep serving; data routes answer 503 until the store comes back
        logger.warning("startup: store unavailable, skipping migration and admin setup")


def _configure_security_headers(app: Flask, config: AppConfig) -> None:
    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")
        resp.headers.setdefault("X-Permitted-Cross-Domain-Policies", "none")
        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )
        return resp


def create_app(config: AppConfig | None = None, *, container: Container | None = None) -> Flask:
    config = config or (container.config if container else load_config())
    setup_logging(config.log_level, debug_mode=config.debug_logging)

    container = container or Container(config)
    # fail fast on a missing signing secret
    container.session_tokens

    _prepare_store(container)

    app = Flask(__name__)
    app.extensions["dailytodo.container"] = container
    container.authenticator.init_app(app)

    configure_error_handling(app)
    configure_request_logging(app)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": config.security.allowed_origins}}
    }
    if any(origin != "*" for origin in config.security.allowed_origins):
        cors_kwargs["supports_credentials"] = True
    CORS(app, **cors_kwargs)
    _configure_security_headers(app, config)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.todos_controller.as_blueprint())
    app.register_blueprint(container.plans_controller.as_blueprint())

    logger.info(f"Flask app initialized ({container.database.dialect})")
    return app


def main() -> None:
    try:
        app = create_app()
    except ConfigurationError as exc:
        logger.error(f"startup: {exc}")
        sys.exit(1)

    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", "5000"))
    app.run(host=host, port=port)


if __name__ == "__main__":
    main()
