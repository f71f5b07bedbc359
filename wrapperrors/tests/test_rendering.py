# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from http import HTTPStatus

import pytest
from loguru import logger as loguru_logger

from wrapperrors import define, new, status_text


@pytest.fixture()
def error_logs():
    records: list[str] = []
    sink_id = loguru_logger.add(lambda message: records.append(message.record["message"]), level="ERROR")
    yield records
    loguru_logger.remove(sink_id)


def test_to_dict_decodes_verbose_form() -> None:
    err = (
        define("not_found", 404)
        .from_definition(Exception("sql: no rows in result set"))
        .with_message("car has not been found in the database")
    )
    assert err.to_dict() == {
        "code": ["not_found"],
        "message": ["car has not been found in the database"],
        "status": [{"message": "Not Found", "code": 404}],
        "cause": "sql: no rows in result set",
    }


def test_sections_keep_fixed_order() -> None:
    err = new("x", Exception("c")).with_status(400).with_message("m")
    assert list(err.to_dict()) == ["code", "message", "status", "cause"]


def test_empty_sections_are_omitted() -> None:
    assert new("x").describe() == '{"code": ["x"]}'
    assert new("x").to_dict() == {"code": ["x"]}
    assert new("x").with_message("m").describe() == '{"code": ["x"], "message": ["m"]}'
    assert new("x", Exception("c")).describe() == '{"code": ["x"], "cause": "c"}'


def test_to_dict_logs_and_returns_empty_on_malformed_text(error_logs: list[str]) -> None:
    err = new("x", Exception('column "name" is missing'))

    assert err.to_dict() == {}
    assert any("error parsing wrapperrors map" in line for line in error_logs)


def test_rendering_never_fails_on_degenerate_values() -> None:
    err = new("")
    assert str(err) == "code: []"
    assert err.describe() == '{"code": [""]}'
    assert err.to_dict() == {"code": [""]}


def test_status_text_lookup() -> None:
    assert status_text(404) == "Not Found"
    assert status_text(HTTPStatus.INTERNAL_SERVER_ERROR) == "Internal Server Error"
    assert status_text(0) == "0"
    assert status_text(799) == "799"


def test_status_text_is_stable_across_interpreters() -> None:
    assert status_text(413) == "Request Entity Too Large"
    assert status_text(414) == "Request URI Too Long"
    assert status_text(416) == "Requested Range Not Satisfiable"
    assert status_text(HTTPStatus.UNPROCESSABLE_ENTITY) == "Unprocessable Entity"
    assert new("x").with_status(422).describe() == (
        '{"code": ["x"], "status": [{"message": "Unprocessable Entity", "code": 422}]}'
    )
