"""LazyCoroResultWriter

Lazy asynchronous Result computation that also accumulates a Log[W].
Used as the writer effect context, so resource lifecycles can record what
they did without an external side channel."""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable, Coroutine
from typing import assert_never

from kungfu import Error, Ok

from .log import Log
from .result import WriterResult

type _Thunk[T, E, W] = Callable[[], Coroutine[typing.Any, typing.Any, WriterResult[T, E, Log[W]]]]


class LazyCoroResultWriter[T, E, W]:
    """Lazy Coroutine Result Writer.

    Nothing runs until the writer is called or awaited; awaiting twice runs
    the computation twice.

    Monadic laws:
    - Left identity: writer_ok(a).then(f) == f(a)
    - Right identity: m.then(writer_ok) == m
    - Associativity: m.then(f).then(g) == m.then(lambda x: f(x).then(g))
    """

    __slots__ = ("_value",)

    def __init__(self, value: _Thunk[T, E, W], /) -> None:
        self._value = value

    @staticmethod
    def tell[LogEntry](*entries: LogEntry) -> LazyCoroResultWriter[None, typing.Never, LogEntry]:
        """Write entries to the log without producing a value."""

        async def run() -> WriterResult[None, typing.Never, Log[LogEntry]]:
            return WriterResult(Ok(None), Log.of(*entries))

        return LazyCoroResultWriter(run)

    def map[U](self, f: Callable[[T], U], /) -> LazyCoroResultWriter[U, E, W]:
        async def run() -> WriterResult[U, E, Log[W]]:
            wr = await self()
            return WriterResult(wr.result.map(f), wr.log)

        return LazyCoroResultWriter(run)

    def then[U](
        self,
        f: Callable[[T], Awaitable[WriterResult[U, E, Log[W]]]],
        /,
    ) -> LazyCoroResultWriter[U, E, W]:
        """
        Monadic bind.

        On Ok the continuation runs and both logs are kept, in order.
        On Error the continuation is skipped and the current log is kept.
        """

        async def run() -> WriterResult[U, E, Log[W]]:
            wr = await self()
            match wr.result:
                case Ok(value):
                    next_wr = await f(value)
                    return WriterResult(next_wr.result, wr.log.combine(next_wr.log))
                case Error(err):
                    return WriterResult(Error(err), wr.log)
                case _ as unreachable:
                    assert_never(unreachable)

        return LazyCoroResultWriter(run)

    def with_log(self, *entries: W) -> LazyCoroResultWriter[T, E, W]:
        """Append entries after this computation, whatever its outcome."""

        async def run() -> WriterResult[T, E, Log[W]]:
            wr = await self()
            return WriterResult(wr.result, wr.log.combine(Log.of(*entries)))

        return LazyCoroResultWriter(run)

    def __call__(self) -> Coroutine[typing.Any, typing.Any, WriterResult[T, E, Log[W]]]:
        return self._value()

    def __await__(self) -> typing.Generator[typing.Any, None, WriterResult[T, E, Log[W]]]:
        return self().__await__()


def writer_ok[T, W](value: T, *log_entries: W) -> LazyCoroResultWriter[T, typing.Never, W]:
    """Successful writer with optional log entries."""

    async def run() -> WriterResult[T, typing.Never, Log[W]]:
        return WriterResult(Ok(value), Log.of(*log_entries))

    return LazyCoroResultWriter(run)


def writer_error[E, W](error: E, *log_entries: W) -> LazyCoroResultWriter[typing.Never, E, W]:
    """Failed writer with optional log entries."""

    async def run() -> WriterResult[typing.Never, E, Log[W]]:
        return WriterResult(Error(error), Log.of(*log_entries))

    return LazyCoroResultWriter(run)


__all__ = (
    "LazyCoroResultWriter",
    "writer_ok",
    "writer_error",
)
