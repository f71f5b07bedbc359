# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Structured, composable error values with codes, messages, statuses and causes."""

from .errors import (
    INTERNAL_ERROR,
    UNKNOWN_ERROR,
    StatusCode,
    StructuredError,
    SupportsStructured,
    SyntheticCause,
    as_structured,
    define,
    error_code,
    error_message,
    error_status,
    from_definition,
    is_error,
    new,
    status_text,
    wrap,
)

__version__ = "0.1.0"

__all__ = [
    "INTERNAL_ERROR",
    "UNKNOWN_ERROR",
    "StatusCode",
    "StructuredError",
    "SupportsStructured",
    "SyntheticCause",
    "as_structured",
    "define",
    "error_code",
    "error_message",
    "error_status",
    "from_definition",
    "is_error",
    "new",
    "status_text",
    "wrap",
]
