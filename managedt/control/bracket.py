"""
Bracket combinators
===================

Guaranteed release around a single acquire/use/release triple, generic over
the effect context (bracketM) with sugar per concrete effect.

Resolution, after a successful acquire:

    use      release   result
    Ok(a)    Ok        Ok(a)
    Ok(a)    Error(e)  Error(e)    a is superseded
    Error(u) Ok        Error(u)
    Error(u) Error(e)  Error(e)    u is superseded

Superseded outcomes are reported through ReleasePolicy, never returned.
Cancellation is not handled: an effect cancelled mid-flight may skip its
release.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable

from kungfu import Error, LazyCoroResult, Ok, Result

from .._errors import Superseded
from .._types import Release, Use
from ..context import LAZY_CORO_RESULT, SYNC, WRITER, EffectContext, SyncResult, defer
from ..writer import LazyCoroResultWriter
from .policy import DEFAULT_RELEASE_POLICY, ReleasePolicy

logger = logging.getLogger(__name__)


def _report(policy: ReleasePolicy, superseded: Superseded[typing.Any, typing.Any]) -> None:
    logger.log(policy.log_level, "bracket: %s", superseded)
    if policy.on_superseded is None:
        return
    try:
        policy.on_superseded(superseded)
    except Exception:
        logger.exception("on_superseded hook failed for %s", superseded)


# ============================================================================
# Generic combinator
# ============================================================================


def bracketM[M, R](
    ctx: EffectContext[M],
    acquire: M,
    *,
    use: Use[R, M],
    release: Release[R, M],
    policy: ReleasePolicy | None = None,
) -> M:
    """
    Generic bracket: acquire -> use -> release (exactly once after a
    successful acquire, whatever use did).

    A failed acquire is returned unchanged and neither use nor release run.
    """
    active = policy or DEFAULT_RELEASE_POLICY

    def after_release(outcome: Result[typing.Any, typing.Any], released: Result[typing.Any, typing.Any]) -> M:
        match released, outcome:
            case Error(release_error), _:
                _report(active, Superseded(outcome, release_error))
                return ctx.fail(release_error)
            case Ok(_), Ok(value):
                return ctx.pure(value)
            case Ok(_), Error(use_error):
                return ctx.fail(use_error)
            case _:
                raise TypeError(f"{ctx!r}.attempt produced a non-Result: {released!r}")

    def after_use(resource: R, outcome: Result[typing.Any, typing.Any]) -> M:
        return ctx.then(
            ctx.attempt(defer(ctx, release, resource)),
            lambda released: after_release(outcome, released),
        )

    def after_acquire(acquired: Result[R, typing.Any]) -> M:
        match acquired:
            case Ok(resource):
                return ctx.then(
                    ctx.attempt(defer(ctx, use, resource)),
                    lambda outcome: after_use(resource, outcome),
                )
            case Error(e):
                logger.debug("bracket: acquire failed with %r, nothing to release", e)
                return ctx.fail(e)
            case _:
                raise TypeError(f"{ctx!r}.attempt produced a non-Result: {acquired!r}")

    return ctx.then(ctx.attempt(acquire), after_acquire)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def bracket[R, T, E](
    acquire: LazyCoroResult[R, E],
    *,
    use: Callable[[R], LazyCoroResult[T, E]],
    release: Callable[[R], LazyCoroResult[typing.Any, E]],
    policy: ReleasePolicy | None = None,
) -> LazyCoroResult[T, E]:
    """Resource management: acquire -> use -> release (always)."""
    return bracketM(LAZY_CORO_RESULT, acquire, use=use, release=release, policy=policy)


# ============================================================================
# Sugar for LazyCoroResultWriter
# ============================================================================


def bracket_writer[R, T, E, W](
    acquire: LazyCoroResultWriter[R, E, W],
    *,
    use: Callable[[R], LazyCoroResultWriter[T, E, W]],
    release: Callable[[R], LazyCoroResultWriter[typing.Any, E, W]],
    policy: ReleasePolicy | None = None,
) -> LazyCoroResultWriter[T, E, W]:
    """Resource management with log merging, release log included."""
    return bracketM(WRITER, acquire, use=use, release=release, policy=policy)


# ============================================================================
# Sugar for SyncResult
# ============================================================================


def bracket_sync[R, T, E](
    acquire: SyncResult[R, E],
    *,
    use: Callable[[R], SyncResult[T, E]],
    release: Callable[[R], SyncResult[typing.Any, E]],
    policy: ReleasePolicy | None = None,
) -> SyncResult[T, E]:
    """Synchronous resource management."""
    return bracketM(SYNC, acquire, use=use, release=release, policy=policy)


__all__ = (
    "bracket",
    "bracket_writer",
    "bracket_sync",
    "bracketM",
)
