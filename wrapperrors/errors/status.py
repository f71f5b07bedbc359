# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

# Python 3.13 renamed these phrases after RFC 9110; labels stay fixed across interpreters.
_PINNED_LABELS = {
    HTTPStatus.REQUEST_ENTITY_TOO_LARGE: "Request Entity Too Large",
    HTTPStatus.REQUEST_URI_TOO_LONG: "Request URI Too Long",
    HTTPStatus.REQUESTED_RANGE_NOT_SATISFIABLE: "Requested Range Not Satisfiable",
    HTTPStatus.UNPROCESSABLE_ENTITY: "Unprocessable Entity",
}


def status_text(status: int) -> str:
    """Human label for an HTTP-style status, or its decimal string when unknown."""
    try:
        known = HTTPStatus(int(status))
    except ValueError:
        return str(int(status))
    return _PINNED_LABELS.get(known, known.phrase)


__all__ = ["status_text"]
