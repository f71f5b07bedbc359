# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from wrapperrors.shared.logging import logger

from .base import StatusCode, StructuredError, as_structured


def new(code: str, cause: BaseException | None = None) -> StructuredError:
    """Concrete error with a single code and an optional cause."""
    return StructuredError(codes=[code], cause=cause)


def define(code: str, status: int) -> StructuredError:
    """Template holding only a code and a status; derive occurrences from it."""
    return StructuredError(codes=[code], statuses=[StatusCode.of(status)], template=True)


def from_definition(
    definition: StructuredError, cause: BaseException | None = None
) -> StructuredError:
    return definition.from_definition(cause)


INTERNAL_ERROR = define("internal_error", HTTPStatus.INTERNAL_SERVER_ERROR)
UNKNOWN_ERROR = define("unknown_error", HTTPStatus.INTERNAL_SERVER_ERROR)


def wrap(err: BaseException | None, message: str) -> StructuredError:
    """Attach ``message`` to ``err``.

    Structured errors keep their identity and gain their own plain text as a
    cause. Anything else becomes an ``unknown_error`` caused by ``err``.
    """
    structured = as_structured(err)
    if structured is not None:
        target = structured.with_message(message)
        return target.with_cause(target)
    logger.debug(f"wrapping {type(err).__name__} as {UNKNOWN_ERROR.joined_codes()}")
    return UNKNOWN_ERROR.from_definition(err).with_message(message)


__all__ = [
    "INTERNAL_ERROR",
    "UNKNOWN_ERROR",
    "define",
    "from_definition",
    "new",
    "wrap",
]
