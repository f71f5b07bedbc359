# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Structured error values: codes, messages, statuses and a single merged cause."""

from __future__ import annotations

import json
import threading
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Protocol

from wrapperrors.shared.logging import logger

from .status import status_text


@dataclass(frozen=True, slots=True)
class StatusCode:
    message: str
    code: int

    @classmethod
    def of(cls, status: int) -> StatusCode:
        return cls(message=status_text(status), code=int(status))

    def describe(self) -> str:
        return f'{{"message": "{self.message}", "code": {self.code}}}'


class SyntheticCause(Exception):
    """Cause built from text only, e.g. two merged causes."""


class SupportsStructured(Protocol):
    def as_structured(self) -> StructuredError | None: ...


def _bracketed(items: Iterable[str]) -> str:
    return "[" + ", ".join(items) + "]"


def _quoted(items: Iterable[str]) -> str:
    return _bracketed(f'"{item}"' for item in items)


@dataclass(slots=True, eq=False)
class StructuredError(Exception):
    """Error carrying classification codes, messages, statuses and a cause.

    Builders append in call order and return the error they mutated, so calls
    chain. Values built by ``define`` are templates: builders called on a
    template mutate and return a clone, never the template itself.
    """

    codes: list[str]
    messages: list[str] = field(default_factory=list)
    statuses: list[StatusCode] = field(default_factory=list)
    cause: BaseException | None = None
    template: bool = field(default=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.codes:
            raise ValueError("StructuredError requires at least one code")
        self.codes = list(self.codes)
        self.messages = list(self.messages)
        self.statuses = list(self.statuses)
        Exception.__init__(self, *self.codes)

    # -- capability ---------------------------------------------------------

    def as_structured(self) -> StructuredError:
        return self

    @property
    def is_template(self) -> bool:
        return self.template

    @property
    def http_status(self) -> int | None:
        """Most recent non-zero status code, if any."""
        with self._lock:
            for status in reversed(self.statuses):
                if status.code:
                    return status.code
        return None

    # -- copies -------------------------------------------------------------

    def clone(self) -> StructuredError:
        with self._lock:
            return StructuredError(
                codes=list(self.codes),
                messages=list(self.messages),
                statuses=list(self.statuses),
                cause=self.cause,
            )

    __copy__ = clone

    def __reduce__(self):
        # rebuild through the constructor so the copy gets its own lock
        with self._lock:
            state = (
                list(self.codes),
                list(self.messages),
                list(self.statuses),
                self.cause,
                self.template,
            )
        return (StructuredError, state)

    def from_definition(self, cause: BaseException | None = None) -> StructuredError:
        with self._lock:
            codes = list(self.codes)
            statuses = [status.code for status in self.statuses]
        derived = StructuredError(codes=codes, cause=cause)
        for status in statuses:
            derived.with_status(status)
        return derived

    # -- builders -----------------------------------------------------------

    def _target(self) -> StructuredError:
        return self.clone() if self.template else self

    def with_message(self, message: str) -> StructuredError:
        target = self._target()
        with target._lock:
            target.messages.append(message)
        return target

    def with_status(self, status: int) -> StructuredError:
        target = self._target()
        pair = StatusCode.of(status)
        with target._lock:
            target.statuses.append(pair)
        return target

    def with_code(self, code: str) -> StructuredError:
        target = self._target()
        with target._lock:
            target.codes.append(code)
        return target

    def with_cause(self, err: BaseException | None) -> StructuredError:
        """Attach ``err`` as cause; an existing cause is merged textually.

        Merging yields a single ``SyntheticCause`` reading ``"<old>; <new>;"``.
        An error whose cause chain leads back to this one (itself included) is
        recorded as its current plain text, so causes never form a cycle.
        """
        target = self._target()
        if err is None:
            return target
        if _reaches(err, target):
            err = SyntheticCause(str(err))
        # texts render unlocked; retry if another caller swapped the cause meanwhile
        while True:
            with target._lock:
                current = target.cause
            merged = err if current is None else SyntheticCause(f"{current}; {err};")
            with target._lock:
                if target.cause is current:
                    target.cause = merged
                    return target

    # -- rendering ----------------------------------------------------------

    def __str__(self) -> str:
        # the cause renders outside our lock
        with self._lock:
            cause, codes = self.cause, list(self.codes)
        parts: list[str] = []
        if cause is not None:
            parts.append(f"cause: [{cause}]")
        if codes:
            parts.append("code: " + _quoted(codes).replace('"', ""))
        return "; ".join(parts)

    def describe(self) -> str:
        """Verbose single-line rendering of every non-empty section."""
        with self._lock:
            parts: list[str] = []
            if self.codes:
                parts.append(f'"code": {_quoted(self.codes)}')
            if self.messages:
                parts.append(f'"message": {_quoted(self.messages)}')
            if self.statuses:
                parts.append(f'"status": {self._statuses()}')
            cause = self.cause
        if cause is not None:
            parts.append(f'"cause": "{cause}"')
        return "{" + ", ".join(parts) + "}"

    def to_dict(self) -> dict[str, Any]:
        """Decode ``describe()`` into a mapping; ``{}`` when it is not valid JSON."""
        try:
            decoded = json.loads(self.describe())
        except json.JSONDecodeError as exc:
            logger.error(f"error parsing wrapperrors map: {exc}")
            return {}
        if not isinstance(decoded, dict):
            return {}
        return decoded

    def _statuses(self) -> str:
        return _bracketed(status.describe() for status in self.statuses)

    def describe_statuses(self) -> str:
        with self._lock:
            return self._statuses()

    def joined_codes(self) -> str:
        with self._lock:
            return "; ".join(self.codes)

    def joined_messages(self) -> str:
        with self._lock:
            return "; ".join(self.messages)

    # -- classification -----------------------------------------------------

    def matches(self, target: BaseException | None) -> bool:
        """True when ``target`` carries the same codes as this error.

        Non-structured targets are compared by their plain text.
        """
        if target is None:
            return False
        other = as_structured(target)
        if other is not None:
            return self.joined_codes() == other.joined_codes()
        return str(self) == str(target)


def _reaches(err: BaseException, target: StructuredError) -> bool:
    """True when ``target`` is ``err`` or sits somewhere in its cause chain."""
    seen: set[int] = set()
    node: BaseException | None = err
    while node is not None and id(node) not in seen:
        if node is target:
            return True
        seen.add(id(node))
        structured = as_structured(node)
        if structured is None:
            return False
        with structured._lock:
            node = structured.cause
    return False


def as_structured(err: object) -> StructuredError | None:
    """Return the structured view of ``err`` when it offers one."""
    if err is None:
        return None
    probe = getattr(err, "as_structured", None)
    if not callable(probe):
        return None
    candidate = probe()
    if isinstance(candidate, StructuredError):
        return candidate
    return None


__all__ = [
    "StatusCode",
    "StructuredError",
    "SupportsStructured",
    "SyntheticCause",
    "as_structured",
]
