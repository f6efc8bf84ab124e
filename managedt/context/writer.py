"""
Writer effect context
=====================

LazyCoroResultWriter as an EffectContext. Logs written by acquire, use and
release are kept in execution order, including the log of a failed step.
"""

from __future__ import annotations

import logging
import typing

from kungfu import Ok, Error, Result

from ..writer import LazyCoroResultWriter, Log, WriterResult, writer_error, writer_ok
from .base import EffectContext

logger = logging.getLogger(__name__)


def _attempt[T, E, W](
    writer: LazyCoroResultWriter[T, E, W],
) -> LazyCoroResultWriter[Result[T, E | Exception], typing.Never, W]:
    async def run() -> WriterResult[Result[T, E | Exception], typing.Never, Log[W]]:
        try:
            wr = await writer()
        except Exception as exc:
            logger.debug("writer effect raised %r, reified as Error", exc)
            return WriterResult(Ok(Error(exc)), Log[W]())
        return WriterResult(Ok(wr.result), wr.log)

    return LazyCoroResultWriter(run)


WRITER: EffectContext[LazyCoroResultWriter[typing.Any, typing.Any, typing.Any]] = EffectContext(
    name="LazyCoroResultWriter",
    pure=writer_ok,
    then=lambda writer, f: writer.then(f),
    map=lambda writer, f: writer.map(f),
    attempt=_attempt,
    fail=writer_error,
)

__all__ = ("WRITER",)
