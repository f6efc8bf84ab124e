"""
LazyCoroResult effect context
=============================

kungfu's LazyCoroResult as an EffectContext: asynchronous, fallible, lazy.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable

from kungfu import Error, LazyCoroResult, Ok, Result

from .base import EffectContext

logger = logging.getLogger(__name__)


def _pure[T](value: T) -> LazyCoroResult[T, typing.Never]:
    async def run() -> Result[T, typing.Never]:
        return Ok(value)

    return LazyCoroResult(run)


def _fail[E](error: E) -> LazyCoroResult[typing.Never, E]:
    async def run() -> Result[typing.Never, E]:
        return Error(error)

    return LazyCoroResult(run)


def _then[T, U, E](
    interp: LazyCoroResult[T, E],
    f: Callable[[T], LazyCoroResult[U, E]],
) -> LazyCoroResult[U, E]:
    async def run() -> Result[U, E]:
        match await interp():
            case Ok(value):
                return await f(value)()
            case Error(e):
                return Error(e)

    return LazyCoroResult(run)


def _map[T, U, E](interp: LazyCoroResult[T, E], f: Callable[[T], U]) -> LazyCoroResult[U, E]:
    async def run() -> Result[U, E]:
        match await interp():
            case Ok(value):
                return Ok(f(value))
            case Error(e):
                return Error(e)

    return LazyCoroResult(run)


def _attempt[T, E](
    interp: LazyCoroResult[T, E],
) -> LazyCoroResult[Result[T, E | Exception], typing.Never]:
    async def run() -> Result[Result[T, E | Exception], typing.Never]:
        try:
            outcome = await interp()
        except Exception as exc:
            logger.debug("effect raised %r, reified as Error", exc)
            return Ok(Error(exc))
        return Ok(outcome)

    return LazyCoroResult(run)


LAZY_CORO_RESULT: EffectContext[LazyCoroResult[typing.Any, typing.Any]] = EffectContext(
    name="LazyCoroResult",
    pure=_pure,
    then=_then,
    map=_map,
    attempt=_attempt,
    fail=_fail,
)

__all__ = ("LAZY_CORO_RESULT",)
