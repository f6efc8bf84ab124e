"""
Synchronous effect context
==========================

SyncResult: a deferred thunk producing a kungfu Result. Nothing runs until
run() is called, and every run() calls the thunk again.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable
from dataclasses import dataclass

from kungfu import Error, Ok, Result

from .base import EffectContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SyncResult[T, E]:
    """
    Lazy synchronous Result computation.

    Example:
        SyncResult.pure(21).map(lambda x: x * 2).run()  # Ok(42)
    """

    thunk: Callable[[], Result[T, E]]

    def run(self) -> Result[T, E]:
        return self.thunk()

    def __call__(self) -> Result[T, E]:
        return self.thunk()

    @staticmethod
    def pure[V](value: V) -> SyncResult[V, typing.Never]:
        return SyncResult(lambda: Ok(value))

    @staticmethod
    def fail[Err](error: Err) -> SyncResult[typing.Never, Err]:
        return SyncResult(lambda: Error(error))

    @staticmethod
    def catching[V](thunk: Callable[[], V]) -> SyncResult[V, Exception]:
        """Run an exception-raising thunk, turning an Exception into Error."""

        def run() -> Result[V, Exception]:
            try:
                return Ok(thunk())
            except Exception as exc:
                return Error(exc)

        return SyncResult(run)

    def map[U](self, f: Callable[[T], U]) -> SyncResult[U, E]:
        def run() -> Result[U, E]:
            match self.thunk():
                case Ok(value):
                    return Ok(f(value))
                case Error(e):
                    return Error(e)

        return SyncResult(run)

    def then[U](self, f: Callable[[T], SyncResult[U, E]]) -> SyncResult[U, E]:
        def run() -> Result[U, E]:
            match self.thunk():
                case Ok(value):
                    return f(value).run()
                case Error(e):
                    return Error(e)

        return SyncResult(run)

    def attempt(self) -> SyncResult[Result[T, E | Exception], typing.Never]:
        def run() -> Result[Result[T, E | Exception], typing.Never]:
            try:
                outcome = self.thunk()
            except Exception as exc:
                logger.debug("sync effect raised %r, reified as Error", exc)
                return Ok(Error(exc))
            return Ok(outcome)

        return SyncResult(run)


SYNC: EffectContext[SyncResult[typing.Any, typing.Any]] = EffectContext(
    name="SyncResult",
    pure=SyncResult.pure,
    then=lambda sync, f: sync.then(f),
    map=lambda sync, f: sync.map(f),
    attempt=lambda sync: sync.attempt(),
    fail=SyncResult.fail,
)

__all__ = ("SyncResult", "SYNC")
