# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest
from flask import Flask

from wrapperrors import define, new
from wrapperrors.errors.http import handle_structured_error
from wrapperrors.shared.config import load_config
from wrapperrors.shared.logging import get_correlation_id
from wrapperrors.shared.middleware import configure_error_handling

NOT_FOUND = define("not_found", 404)


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch: pytest.MonkeyPatch):
    for name in ("WRAPPERRORS_EXPOSE_CAUSE", "WRAPPERRORS_DEFAULT_STATUS", "WRAPPERRORS_DEBUG_LOGGING"):
        monkeypatch.delenv(name, raising=False)
    load_config.cache_clear()
    yield
    load_config.cache_clear()


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)

    @app.get("/cars/<int:car_id>")
    def get_car(car_id: int):
        raise NOT_FOUND.from_definition(Exception("sql: no rows in result set")).with_message(
            f"car {car_id} has not been found in the database"
        )

    @app.get("/boom")
    def boom():
        raise RuntimeError("password=hunter2hunter2 leaked")

    @app.get("/teapot")
    def teapot():
        raise new("teapot_error")

    @app.get("/request-id")
    def request_id():
        return {"request_id": get_correlation_id()}

    return app


def test_structured_error_renders_status_and_body(flask_app: Flask) -> None:
    with flask_app.test_client() as client:
        response = client.get("/cars/7")

    assert response.status_code == 404
    assert response.get_json() == {
        "code": ["not_found"],
        "message": ["car 7 has not been found in the database"],
        "status": [{"message": "Not Found", "code": 404}],
    }


def test_unexpected_error_becomes_internal_error(flask_app: Flask) -> None:
    with flask_app.test_client() as client:
        response = client.get("/boom")

    assert response.status_code == 500
    body = response.get_json()
    assert body["code"] == ["internal_error"]
    assert "cause" not in body
    assert "hunter2" not in response.get_data(as_text=True)


def test_error_without_status_uses_default(flask_app: Flask) -> None:
    with flask_app.test_client() as client:
        response = client.get("/teapot")

    assert response.status_code == 500
    assert response.get_json() == {"code": ["teapot_error"]}


def test_default_status_comes_from_config(
    flask_app: Flask, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("WRAPPERRORS_DEFAULT_STATUS", "503")
    load_config.cache_clear()

    with flask_app.test_client() as client:
        response = client.get("/teapot")

    assert response.status_code == 503


def test_http_exceptions_pass_through(flask_app: Flask) -> None:
    with flask_app.test_client() as client:
        response = client.get("/nowhere")

    assert response.status_code == 404
    assert not response.is_json


def test_exposed_cause_is_sanitized(flask_app: Flask) -> None:
    err = new("db_error", Exception("connect to postgres://app:hunter22@db/cars failed")).with_status(503)

    with flask_app.app_context():
        response, status = handle_structured_error(err, expose_cause=True)

    assert status == 503
    body = response.get_json()
    assert body["cause"] == "connect to postgres://app:***REDACTED***@db/cars failed"


def test_malformed_body_falls_back_to_codes(flask_app: Flask) -> None:
    err = new("quoted", Exception('bad "quote"')).with_status(400)

    with flask_app.app_context():
        response, status = handle_structured_error(err)

    assert status == 400
    assert response.get_json() == {"code": ["quoted"]}


def test_request_id_is_bound_to_logger(flask_app: Flask) -> None:
    with flask_app.test_client() as client:
        response = client.get("/request-id", headers={"X-Request-ID": "req-42"})
        generated = client.get("/request-id")

    assert response.get_json() == {"request_id": "req-42"}
    assert generated.get_json()["request_id"] not in ("-", "req-42")
    assert get_correlation_id() == "-"
