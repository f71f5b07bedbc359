# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

from wrapperrors.shared.config import load_config
from wrapperrors.shared.logging import logger, sanitize_message

from .base import StructuredError
from .factory import INTERNAL_ERROR


def _payload(error: StructuredError, expose_cause: bool) -> dict[str, Any]:
    payload = error.to_dict()
    if not payload:
        payload = {"code": list(error.codes)}
    cause = payload.pop("cause", None)
    if expose_cause and cause is not None:
        payload["cause"] = sanitize_message(str(cause))
    return payload


def handle_structured_error(
    error: StructuredError, *, expose_cause: bool | None = None
) -> tuple[Response, int]:
    config = load_config()
    if expose_cause is None:
        expose_cause = config.expose_cause
    response = jsonify(_payload(error, expose_cause))
    return response, error.http_status or config.default_status


def register_error_handler(app: Flask) -> None:
    config = load_config()
    debug_mode = config.debug_logging

    @app.errorhandler(StructuredError)
    def _handle_structured(exc: StructuredError):
        logger.warning(
            f"Handled structured error {exc.joined_codes()} on {request.method} {request.path}"
        )
        return handle_structured_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        return exc

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        if debug_mode:
            logger.opt(exception=exc).error(
                f"Unhandled exception: {request.method} {request.path}, "
                f"query={dict(request.args)}, body_size={len(request.data)}"
            )
        else:
            logger.error(f"Error: {type(exc).__name__} on {request.method} {request.path}")
        return handle_structured_error(INTERNAL_ERROR.from_definition(exc))


__all__ = ["handle_structured_error", "register_error_handler"]
