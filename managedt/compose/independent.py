"""
Independent composition
=======================

Handles with no data dependency, paired into a tuple. Acquisition follows
argument order and release is reversed, exactly as if each handle were
nested inside the previous one.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._errors import EmptyCompositionError
from .._helpers import common_context, identity
from ..collection.fold import fold_collectionM
from ..managed import ManagedT


def _push(acc: tuple[typing.Any, ...], resource: typing.Any) -> tuple[typing.Any, ...]:
    return (*acc, resource)


def independent[M](*handles: ManagedT[M, typing.Any]) -> ManagedT[M, tuple[typing.Any, ...]]:
    """
    independent(h1, h2, ..., hn) -> handle of (r1, r2, ..., rn).

    All handles must share one effect context. Raises EmptyCompositionError
    when called without handles.
    """
    if not handles:
        raise EmptyCompositionError()
    ctx = common_context(handles)
    return fold_collectionM(ctx, handles, identity, combine=_push, initial=())


def zip_with[M, R](
    *handles: ManagedT[M, typing.Any],
    combiner: Callable[[tuple[typing.Any, ...]], R],
) -> ManagedT[M, R]:
    """independent, then transform the tuple of resources."""
    return independent(*handles).map(combiner)


__all__ = ("independent", "zip_with")
