from __future__ import annotations

import logging
from typing import Any

from flask import Flask, request
from werkzeug.exceptions import HTTPException

from florasense.blueprints.api.diagnosis import diagnosis_api
from florasense.config import load_config, setup_logging


def create_app(config_overrides: dict[str, Any] | None = None) -> Flask:
    config = load_config()
    if config_overrides:
        for key, value in config_overrides.items():
            attr = key if hasattr(config, key) else key.lower()
            setattr(config, attr, value)

    # Configure logging early so classifier training is visible in the terminal and florasense.log.
    setup_logging(
        debug=config.DEBUG,
        level=config.log_level,
        log_file=config.log_file if config.log_to_file else None,
    )

    flask_app = Flask(__name__)
    flask_app.config.update(config.as_flask_config())
    flask_app.json.sort_keys = config.json_sort_keys

    from florasense.services.container import ServiceContainer

    # Trains every classifier before the first request can be served
    container = ServiceContainer.build(config)
    flask_app.config["CONTAINER"] = container

    # Global JSON error handler for anything that escapes safe_route on /api/ routes.
    @flask_app.errorhandler(Exception)
    def _handle_unhandled(exc):
        if not request.path.startswith("/api/"):
            raise exc
        from florasense.domain.exceptions import FloraSenseError
        from florasense.utils.http import error_response, safe_error

        if isinstance(exc, HTTPException):
            status = int(exc.code or 500)
            if status >= 500:
                return safe_error(exc, status, context="http-exception")
            return error_response(exc.description or "Request failed", status)

        if isinstance(exc, FloraSenseError):
            status = exc.http_status
            if status >= 500:
                return safe_error(exc, status, context=type(exc).__name__)
            return error_response(str(exc) or "Request failed", status)

        return safe_error(exc, 500, context="unhandled")

    @flask_app.errorhandler(413)
    def _handle_too_large(_exc):
        from florasense.utils.http import error_response

        return error_response("Request payload too large", 413)

    flask_app.register_blueprint(diagnosis_api)

    for bp_name, _bp in flask_app.blueprints.items():
        logging.info(f" Registered blueprint: {bp_name}")

    logger = logging.getLogger(__name__)
    logger.info("FloraSense application initialized successfully.")

    return flask_app


__all__ = ["create_app"]
