"""
Effect context typeclass.

Everything in managedt is written once against EffectContext and runs on
any effect type that supplies these five operations.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EffectContext[M]:
    """
    Capability set of an effect type M.

    pure(value)    -> M that succeeds with value, no effect
    then(m, f)     -> M running m, then f(value of m); a failure of m skips f
    map(m, f)      -> M with f applied to the success value of m
    attempt(m)     -> M that never fails and succeeds with m's Result
                      (Ok(value) or Error(error)); Exceptions raised while
                      running m are reified as Error(exception)
    fail(error)    -> M that fails with error

    Implementations must keep M lazy: building an M performs no effect,
    and running the same M twice performs its effect twice.
    """

    name: str
    pure: Callable[[typing.Any], M]
    then: Callable[[M, Callable[[typing.Any], M]], M]
    map: Callable[[M, Callable[[typing.Any], typing.Any]], M]
    attempt: Callable[[M], M]
    fail: Callable[[typing.Any], M]

    def __repr__(self) -> str:
        return f"EffectContext({self.name})"


def defer[M, A](ctx: EffectContext[M], f: Callable[[A], M], value: A) -> M:
    """
    Call f(value) inside the effect instead of at construction time.

    A synchronous raise from f then happens while the effect runs, where an
    enclosing attempt can reify it.
    """
    return ctx.then(ctx.pure(value), f)


__all__ = ("EffectContext", "defer")
