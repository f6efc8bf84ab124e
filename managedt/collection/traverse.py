"""Traverse / sequence combinators

Collect the resources of many handles into a list, built on the fold."""

from __future__ import annotations

import typing
from collections.abc import Callable, Sequence

from kungfu import LazyCoroResult

from .._helpers import identity
from .._types import Source
from ..context import LAZY_CORO_RESULT, SYNC, WRITER, EffectContext, SyncResult
from ..managed import ManagedT
from ..writer import LazyCoroResultWriter
from .fold import fold_collectionM


def _append[R](acc: list[R], resource: R) -> list[R]:
    return [*acc, resource]


# Generic combinators
def traverseM[M, A, R](
    ctx: EffectContext[M],
    items: Source[A],
    to_handle: Callable[[A], ManagedT[M, R]],
) -> ManagedT[M, list[R]]:
    """[A] -> (A -> Handle[R]) -> Handle[[R]], acquired in order, released reversed."""
    return fold_collectionM(ctx, items, to_handle, combine=_append, initial=[])


def sequenceM[M, R](
    ctx: EffectContext[M],
    handles: Sequence[ManagedT[M, R]],
) -> ManagedT[M, list[R]]:
    """Flip structure: [Handle[R]] -> Handle[[R]]."""
    return traverseM(ctx, handles, identity)


# Sugar for LazyCoroResult
type _LCRHandle[R] = ManagedT[LazyCoroResult[typing.Any, typing.Any], R]


def traverse[A, R](items: Source[A], to_handle: Callable[[A], _LCRHandle[R]]) -> _LCRHandle[list[R]]:
    return traverseM(LAZY_CORO_RESULT, items, to_handle)


def sequence[R](handles: Sequence[_LCRHandle[R]]) -> _LCRHandle[list[R]]:
    return sequenceM(LAZY_CORO_RESULT, handles)


# Sugar for LazyCoroResultWriter
type _WriterHandle[R] = ManagedT[LazyCoroResultWriter[typing.Any, typing.Any, typing.Any], R]


def traverse_writer[A, R](items: Source[A], to_handle: Callable[[A], _WriterHandle[R]]) -> _WriterHandle[list[R]]:
    return traverseM(WRITER, items, to_handle)


def sequence_writer[R](handles: Sequence[_WriterHandle[R]]) -> _WriterHandle[list[R]]:
    return sequenceM(WRITER, handles)


# Sugar for SyncResult
type _SyncHandle[R] = ManagedT[SyncResult[typing.Any, typing.Any], R]


def traverse_sync[A, R](items: Source[A], to_handle: Callable[[A], _SyncHandle[R]]) -> _SyncHandle[list[R]]:
    return traverseM(SYNC, items, to_handle)


def sequence_sync[R](handles: Sequence[_SyncHandle[R]]) -> _SyncHandle[list[R]]:
    return sequenceM(SYNC, handles)


__all__ = (
    "traverse",
    "sequence",
    "traverse_writer",
    "sequence_writer",
    "traverse_sync",
    "sequence_sync",
    "traverseM",
    "sequenceM",
)
