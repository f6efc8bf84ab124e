"""Internal helpers shared by the composition modules.

Not part of the public API."""

from __future__ import annotations

import typing
from collections.abc import Sequence

from kungfu import Error, Ok

from ._types import Source

if typing.TYPE_CHECKING:
    from .context import EffectContext
    from .managed import ManagedT


def identity[T](x: T) -> T:
    return x


def elements[A](source: Source[A]) -> list[A]:
    """
    Materialize a fold source.

    None and Error(...) contribute nothing, Ok(value) contributes value,
    any other iterable contributes its items in order. Materializing once
    keeps a handle built from a one-shot iterator reusable.
    """
    match source:
        case None:
            return []
        case Ok(value):
            return [value]
        case Error(_):
            return []
        case _:
            return list(source)


def common_context[M](handles: Sequence[ManagedT[M, typing.Any]]) -> EffectContext[M]:
    """The single effect context shared by handles, or TypeError."""
    ctx = handles[0].ctx
    for handle in handles[1:]:
        if handle.ctx is not ctx:
            raise TypeError(f"cannot compose handles over {ctx!r} and {handle.ctx!r}")
    return ctx


__all__ = (
    "identity",
    "elements",
    "common_context",
)
