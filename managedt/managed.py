"""
ManagedT
========

A resource handle: a deferred acquire/release pair that can be run with
any number of use functions. Building a handle performs no effect; each
run performs a fresh acquire -> use -> release cycle.

Composed handles (then, zip, fold) keep references to their parts and
synthesize run by delegation, so nesting and release order follow from
plain nested brackets.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Error, Ok, Result

from ._types import LCR, Release, Use
from .context import LAZY_CORO_RESULT, SYNC, WRITER, EffectContext, SyncResult, defer
from .control.bracket import bracketM
from .control.policy import ReleasePolicy
from .writer import LazyCoroResultWriter


class ManagedT[M, R]:
    """
    Resource handle over effect M producing resources of type R.

    The only way to reach the resource is run(use): the resource lives
    exactly as long as the effect returned by use.

    Laws (== meaning same acquisitions, releases and result):
    - Left identity: lift_pureM(ctx, a).then(f) == f(a)
    - Right identity: h.then(lambda r: lift_pureM(ctx, r)) == h
    - Associativity: h.then(f).then(g) == h.then(lambda r: f(r).then(g))
    """

    __slots__ = ("_ctx", "_run")

    def __init__(self, ctx: EffectContext[M], run: Callable[[Callable[[R], M]], M], /) -> None:
        self._ctx = ctx
        self._run = run

    @property
    def ctx(self) -> EffectContext[M]:
        return self._ctx

    def run(self, use: Callable[[R], M], /) -> M:
        """Acquire, apply use, release. Returns the effect; nothing runs until it does."""
        return self._run(use)

    def use_(self, effect: M, /) -> M:
        """Hold the resource while effect runs, without looking at it."""
        return self._run(lambda _: effect)

    def map[U](self, f: Callable[[R], U], /) -> ManagedT[M, U]:
        return ManagedT(self._ctx, lambda use: self._run(lambda resource: use(f(resource))))

    def then[U](self, f: Callable[[R], ManagedT[M, U]], /) -> ManagedT[M, U]:
        """Sequential composition: the next handle is built from this resource."""
        from .compose.sequential import sequential

        return sequential(self, f)

    def zip(self, *others: ManagedT[M, typing.Any]) -> ManagedT[M, tuple[typing.Any, ...]]:
        """Independent composition with others, acquired after this handle."""
        from .compose.independent import independent

        return independent(self, *others)

    def __repr__(self) -> str:
        return f"ManagedT({self._ctx.name})"


# ============================================================================
# Generic constructors
# ============================================================================


def makeM[M, R](
    ctx: EffectContext[M],
    acquire: M,
    *,
    release: Release[R, M],
    policy: ReleasePolicy | None = None,
) -> ManagedT[M, R]:
    """
    Handle from a lazy acquire effect and a release function.

    acquire is re-run on every run of the handle.
    """

    def run(use: Use[R, M]) -> M:
        return bracketM(ctx, acquire, use=use, release=release, policy=policy)

    return ManagedT(ctx, run)


def lift_pureM[M, R](ctx: EffectContext[M], value: R) -> ManagedT[M, R]:
    """
    Handle that hands out value with no acquisition and no release.

    An exception raised by use becomes Error(exception), as it does for a
    handle built with makeM.
    """

    def settle(outcome: Result[typing.Any, typing.Any]) -> M:
        match outcome:
            case Ok(result):
                return ctx.pure(result)
            case Error(e):
                return ctx.fail(e)
            case _:
                raise TypeError(f"{ctx!r}.attempt produced a non-Result: {outcome!r}")

    def run(use: Use[R, M]) -> M:
        return ctx.then(ctx.attempt(defer(ctx, use, value)), settle)

    return ManagedT(ctx, run)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def make[R, E](
    acquire: LCR[R, E],
    *,
    release: Callable[[R], LCR[typing.Any, E]],
    policy: ReleasePolicy | None = None,
) -> ManagedT[LCR[typing.Any, E], R]:
    return makeM(LAZY_CORO_RESULT, acquire, release=release, policy=policy)


def lift_pure[R](value: R) -> ManagedT[LCR[typing.Any, typing.Any], R]:
    return lift_pureM(LAZY_CORO_RESULT, value)


# ============================================================================
# Sugar for LazyCoroResultWriter
# ============================================================================


def make_writer[R, E, W](
    acquire: LazyCoroResultWriter[R, E, W],
    *,
    release: Callable[[R], LazyCoroResultWriter[typing.Any, E, W]],
    policy: ReleasePolicy | None = None,
) -> ManagedT[LazyCoroResultWriter[typing.Any, E, W], R]:
    return makeM(WRITER, acquire, release=release, policy=policy)


def lift_pure_writer[R](value: R) -> ManagedT[LazyCoroResultWriter[typing.Any, typing.Any, typing.Any], R]:
    return lift_pureM(WRITER, value)


# ============================================================================
# Sugar for SyncResult
# ============================================================================


def make_sync[R, E](
    acquire: SyncResult[R, E],
    *,
    release: Callable[[R], SyncResult[typing.Any, E]],
    policy: ReleasePolicy | None = None,
) -> ManagedT[SyncResult[typing.Any, E], R]:
    return makeM(SYNC, acquire, release=release, policy=policy)


def lift_pure_sync[R](value: R) -> ManagedT[SyncResult[typing.Any, typing.Any], R]:
    return lift_pureM(SYNC, value)


__all__ = (
    "ManagedT",
    # Generic
    "makeM",
    "lift_pureM",
    # LazyCoroResult
    "make",
    "lift_pure",
    # LazyCoroResultWriter
    "make_writer",
    "lift_pure_writer",
    # SyncResult
    "make_sync",
    "lift_pure_sync",
)
