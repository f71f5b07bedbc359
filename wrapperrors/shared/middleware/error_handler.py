# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid

from flask import Flask, g, request

from wrapperrors.errors.http import register_error_handler
from wrapperrors.shared.logging import clear_correlation_id, set_correlation_id


def _bind_correlation_id() -> None:
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    g._correlation_id = request_id
    set_correlation_id(request_id)


def configure_error_handling(app: Flask) -> None:
    register_error_handler(app)
    app.before_request(_bind_correlation_id)

    @app.teardown_request
    def _teardown(_exc):
        clear_correlation_id()
