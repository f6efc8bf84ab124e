"""
Fold combinators
================

Combine a runtime-sized collection of handles into one handle over an
aggregated value. Acquisition follows collection order, release is the
exact reverse; an empty collection yields the identity handle.

Every item nests one more bracket inside the previous ones, and each level
adds Python stack frames while the handle runs. Folds over a few hundred
items (around a hundred on SYNC) can exceed the recursion limit; the run
then fails with Error(RecursionError).
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable

from kungfu import LazyCoroResult

from .._helpers import elements
from .._types import Combine, Source
from ..context import LAZY_CORO_RESULT, SYNC, WRITER, EffectContext, SyncResult
from ..managed import ManagedT, lift_pureM
from ..writer import LazyCoroResultWriter

logger = logging.getLogger(__name__)


def _step[M, S, A, R](
    acc: ManagedT[M, S],
    item: A,
    to_handle: Callable[[A], ManagedT[M, R]],
    combine: Combine[S, R],
) -> ManagedT[M, S]:
    # The new handle nests inside everything acquired so far.
    return acc.then(lambda state: to_handle(item).map(lambda resource: combine(state, resource)))


# ============================================================================
# Generic combinator
# ============================================================================


def fold_collectionM[M, A, R, S](
    ctx: EffectContext[M],
    items: Source[A],
    to_handle: Callable[[A], ManagedT[M, R]],
    *,
    combine: Combine[S, R],
    initial: S,
) -> ManagedT[M, S]:
    """
    Left fold of resources: combine(...combine(initial, r1)..., rn).

    items may be an iterable, None (absent optional) or a kungfu Result
    (only Ok contributes). It is materialized once, here; to_handle is
    called on every run, inside the enclosing acquisitions.
    """
    collected = elements(items)
    logger.debug("fold_collection: %d item(s) over %r", len(collected), ctx)
    handle: ManagedT[M, S] = lift_pureM(ctx, initial)
    for item in collected:
        handle = _step(handle, item, to_handle, combine)
    return handle


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def fold_collection[A, R, S](
    items: Source[A],
    to_handle: Callable[[A], ManagedT[LazyCoroResult[typing.Any, typing.Any], R]],
    *,
    combine: Combine[S, R],
    initial: S,
) -> ManagedT[LazyCoroResult[typing.Any, typing.Any], S]:
    return fold_collectionM(LAZY_CORO_RESULT, items, to_handle, combine=combine, initial=initial)


# ============================================================================
# Sugar for LazyCoroResultWriter
# ============================================================================


def fold_collection_writer[A, R, S](
    items: Source[A],
    to_handle: Callable[[A], ManagedT[LazyCoroResultWriter[typing.Any, typing.Any, typing.Any], R]],
    *,
    combine: Combine[S, R],
    initial: S,
) -> ManagedT[LazyCoroResultWriter[typing.Any, typing.Any, typing.Any], S]:
    return fold_collectionM(WRITER, items, to_handle, combine=combine, initial=initial)


# ============================================================================
# Sugar for SyncResult
# ============================================================================


def fold_collection_sync[A, R, S](
    items: Source[A],
    to_handle: Callable[[A], ManagedT[SyncResult[typing.Any, typing.Any], R]],
    *,
    combine: Combine[S, R],
    initial: S,
) -> ManagedT[SyncResult[typing.Any, typing.Any], S]:
    return fold_collectionM(SYNC, items, to_handle, combine=combine, initial=initial)


__all__ = (
    "fold_collection",
    "fold_collection_writer",
    "fold_collection_sync",
    "fold_collectionM",
)
