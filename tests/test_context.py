from __future__ import annotations

import typing

import pytest

from managedt import LAZY_CORO_RESULT, SYNC, WRITER, EffectContext
from managedt.context import defer
from conftest import error_value, ok_value

CONTEXTS = [LAZY_CORO_RESULT, WRITER, SYNC]


async def run_effect(ctx: EffectContext[typing.Any], effect: typing.Any) -> typing.Any:
    """Run effect in ctx and return its kungfu Result."""
    if ctx is SYNC:
        return effect.run()
    if ctx is WRITER:
        return (await effect).result
    return await effect


def raising(message: str) -> typing.Any:
    raise ValueError(message)


@pytest.mark.parametrize("ctx", CONTEXTS, ids=lambda c: c.name)
class TestEffectContext:
    async def test_pure_succeeds(self, ctx):
        assert ok_value(await run_effect(ctx, ctx.pure(3))) == 3

    async def test_fail_fails(self, ctx):
        assert error_value(await run_effect(ctx, ctx.fail("bad"))) == "bad"

    async def test_then_sequences(self, ctx):
        effect = ctx.then(ctx.pure(2), lambda n: ctx.pure(n * 10))
        assert ok_value(await run_effect(ctx, effect)) == 20

    async def test_then_short_circuits_on_failure(self, ctx):
        called: list[int] = []

        def follow(n: int):
            called.append(n)
            return ctx.pure(n)

        result = await run_effect(ctx, ctx.then(ctx.fail("stop"), follow))
        assert error_value(result) == "stop"
        assert called == []

    async def test_map(self, ctx):
        assert ok_value(await run_effect(ctx, ctx.map(ctx.pure("ab"), len))) == 2

    async def test_attempt_reifies_failure(self, ctx):
        outer = await run_effect(ctx, ctx.attempt(ctx.fail("bad")))
        assert error_value(ok_value(outer)) == "bad"

    async def test_attempt_reifies_success(self, ctx):
        outer = await run_effect(ctx, ctx.attempt(ctx.pure(1)))
        assert ok_value(ok_value(outer)) == 1

    async def test_attempt_reifies_raised_exception(self, ctx):
        outer = await run_effect(ctx, ctx.attempt(defer(ctx, raising, "kaput")))
        assert isinstance(error_value(ok_value(outer)), ValueError)

    async def test_effects_are_lazy_and_rerunnable(self, ctx):
        calls: list[int] = []

        def count(_: None):
            calls.append(1)
            return ctx.pure(len(calls))

        effect = defer(ctx, count, None)
        assert calls == []
        assert ok_value(await run_effect(ctx, effect)) == 1
        assert ok_value(await run_effect(ctx, effect)) == 2

    def test_repr(self, ctx):
        assert repr(ctx) == f"EffectContext({ctx.name})"
