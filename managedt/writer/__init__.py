"""
Writer effect
=============

LazyCoroResultWriter combines:
- Lazy (nothing runs until awaited)
- Coro (asynchronous)
- Result[T, E] (success/error)
- Writer[Log[W]] (log accumulation)
"""

from .log import Log
from .result import WriterResult
from .monad import LazyCoroResultWriter, writer_ok, writer_error

__all__ = (
    "Log",
    "WriterResult",
    "LazyCoroResultWriter",
    "writer_ok",
    "writer_error",
)
