# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from .base import as_structured


def is_error(err: BaseException | None, target: BaseException | None) -> bool:
    """Structured pairs compare by verbose rendering, anything else by identity."""
    left = as_structured(err)
    right = as_structured(target)
    if left is not None and right is not None:
        return left.describe() == right.describe()
    return err is target


def error_code(err: BaseException | None) -> str:
    structured = as_structured(err)
    return structured.joined_codes() if structured is not None else ""


def error_message(err: BaseException | None) -> str:
    structured = as_structured(err)
    return structured.joined_messages() if structured is not None else ""


def error_status(err: BaseException | None) -> str:
    structured = as_structured(err)
    return structured.describe_statuses() if structured is not None else ""


__all__ = ["error_code", "error_message", "error_status", "is_error"]
