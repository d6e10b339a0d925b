"""Result type for explicit error handling.

A Result holds either a success value or a failure error, never both. It is
built only through the ``Result.ok`` and ``Result.error`` factories.

Usage:
    def parse_port(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return Result.error(f"not a port: {raw!r}")
        return Result.ok(int(raw))

    port = parse_port(text).unwrap_or(8080)

    result = parse_port(text)
    if result.is_ok():
        serve(result.unwrap())
    else:
        warn(result.err)

Success and failure are told apart by an explicit tag, so falsy payloads such
as ``0``, ``""`` or ``None`` are valid on either side.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Never, cast, final

from tagged_result.exceptions import ResultError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class _Tag(enum.Enum):
    SUCCESS = "success"
    FAILURE = "failure"


_FACTORY_KEY = object()


@final
@dataclass(frozen=True, slots=True, init=False, repr=False)
class Result[V, E]:
    """A value representing either success (V) or failure (E)."""

    _tag: _Tag
    _payload: object

    def __init__(self, tag: _Tag, payload: object, *, _key: object = None) -> None:
        if _key is not _FACTORY_KEY:
            raise TypeError("Result cannot be constructed directly; use Result.ok() or Result.error()")
        object.__setattr__(self, "_tag", tag)
        object.__setattr__(self, "_payload", payload)

    @classmethod
    def ok[_V](cls, value: _V) -> Result[_V, Never]:  # noqa: UP049
        """Creates a successful result."""
        return cast("Result[_V, Never]", cls(_Tag.SUCCESS, value, _key=_FACTORY_KEY))

    @classmethod
    def error[_E](cls, err: _E) -> Result[Never, _E]:  # noqa: UP049
        """Creates a failed result."""
        return cast("Result[Never, _E]", cls(_Tag.FAILURE, err, _key=_FACTORY_KEY))

    def is_ok(self) -> bool:
        """Returns True if this result represents a success."""
        return self._tag is _Tag.SUCCESS

    def is_error(self) -> bool:
        """Returns True if this result represents a failure."""
        return self._tag is _Tag.FAILURE

    @property
    def value(self) -> V | None:
        """The success value, or None for a failed result."""
        return cast("V", self._payload) if self.is_ok() else None

    @property
    def err(self) -> E | None:
        """The failure error, or None for a successful result."""
        return cast("E", self._payload) if self.is_error() else None

    def unwrap(self) -> V:
        """Returns the success value.

        Raises:
            ResultError: If this result represents a failure. The error
                payload is available as ``ResultError.error``.
        """
        if self.is_error():
            logger.debug("unwrap called on error result: %r", self._payload)
            raise ResultError(self._payload)
        return cast("V", self._payload)

    def unwrap_or(self, fallback: V) -> V:
        """Returns the success value, or ``fallback`` for a failed result."""
        if self.is_error():
            return fallback
        return cast("V", self._payload)

    def unwrap_or_else(self, fallback: Callable[[], V]) -> V:
        """Returns the success value, or calls ``fallback`` for a failed result.

        ``fallback`` is only called when the result represents a failure.
        """
        if self.is_error():
            return fallback()
        return cast("V", self._payload)

    def map[R](self, fn: Callable[[V], R]) -> Result[R, E]:
        """Applies ``fn`` to the success value, passing failures through."""
        if self.is_ok():
            return Result.ok(fn(cast("V", self._payload)))
        return Result.error(cast("E", self._payload))

    def map_error[R](self, fn: Callable[[E], R]) -> Result[V, R]:
        """Applies ``fn`` to the failure error, passing successes through."""
        if self.is_error():
            return Result.error(fn(cast("E", self._payload)))
        return Result.ok(cast("V", self._payload))

    def __repr__(self) -> str:
        if self.is_ok():
            return f"Result.ok({self._payload!r})"
        return f"Result.error({self._payload!r})"
