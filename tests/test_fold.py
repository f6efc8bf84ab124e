from __future__ import annotations

import pytest
from kungfu import Error, Ok

from managedt import fold_collection, sequence, traverse
from conftest import Recorder, error_value, lcr_ok, ok_value


def concat(acc: str, resource: str) -> str:
    return acc + resource


class TestFoldCollection:
    @pytest.mark.parametrize("size", [0, 1, 5])
    async def test_acquire_in_order_release_reversed(self, recorder: Recorder, size: int):
        names = [f"r{i}" for i in range(size)]
        handle = fold_collection(names, recorder.resource, combine=concat, initial="")
        result = await handle.run(lcr_ok)
        assert ok_value(result) == "".join(names)
        assert recorder.events == [f"acquire {n}" for n in names] + [f"release {n}" for n in reversed(names)]

    async def test_empty_is_identity(self, recorder: Recorder):
        handle = fold_collection([], recorder.resource, combine=concat, initial="seed")
        result = await handle.run(lcr_ok)
        assert ok_value(result) == "seed"
        assert recorder.events == []

    async def test_combine_is_a_left_fold(self, recorder: Recorder):
        handle = fold_collection(
            ["a", "b", "c"],
            recorder.resource,
            combine=lambda acc, r: f"({acc}{r})",
            initial="",
        )
        assert ok_value(await handle.run(lcr_ok)) == "(((a)b)c)"

    async def test_failure_at_item_releases_earlier_items(self, recorder: Recorder):
        def open_shard(name: str):
            if name == "r2":
                return recorder.resource(name, acquire_error="r2 offline")
            return recorder.resource(name)

        handle = fold_collection(["r0", "r1", "r2", "r3"], open_shard, combine=concat, initial="")
        result = await handle.run(recorder.use())
        assert error_value(result) == "r2 offline"
        assert recorder.events == ["acquire r0", "acquire r1", "release r1", "release r0"]

    async def test_generator_source_is_reusable(self, recorder: Recorder):
        handle = fold_collection((n for n in ["a", "b"]), recorder.resource, combine=concat, initial="")
        assert ok_value(await handle.run(lcr_ok)) == "ab"
        assert ok_value(await handle.run(lcr_ok)) == "ab"
        assert recorder.events.count("acquire a") == 2

    @pytest.mark.parametrize("names", [[], ["a"]], ids=["empty", "one"])
    async def test_raising_use_becomes_error(self, recorder: Recorder, names: list[str]):
        def explode(_: str):
            raise ValueError("use blew up")

        handle = fold_collection(names, recorder.resource, combine=concat, initial="")
        result = await handle.run(explode)
        assert isinstance(error_value(result), ValueError)
        assert recorder.events == [f"acquire {n}" for n in names] + [f"release {n}" for n in names]

    def test_to_handle_not_called_at_construction(self, recorder: Recorder):
        called: list[str] = []

        def to_handle(name: str):
            called.append(name)
            return recorder.resource(name)

        fold_collection(["a", "b"], to_handle, combine=concat, initial="")
        assert called == []


class TestFoldSources:
    async def test_absent_optional_contributes_nothing(self, recorder: Recorder):
        handle = fold_collection(None, recorder.resource, combine=concat, initial="none")
        assert ok_value(await handle.run(lcr_ok)) == "none"
        assert recorder.events == []

    async def test_ok_branch_contributes(self, recorder: Recorder):
        handle = fold_collection(Ok("replica"), recorder.resource, combine=concat, initial="")
        assert ok_value(await handle.run(lcr_ok)) == "replica"
        assert recorder.events == ["acquire replica", "release replica"]

    async def test_error_branch_contributes_nothing(self, recorder: Recorder):
        handle = fold_collection(Error("disabled"), recorder.resource, combine=concat, initial="")
        assert ok_value(await handle.run(lcr_ok)) == ""
        assert recorder.events == []


class TestTraverse:
    async def test_traverse_collects_in_order(self, recorder: Recorder):
        result = await traverse(["w1", "w2", "w3"], recorder.resource).run(lcr_ok)
        assert ok_value(result) == ["w1", "w2", "w3"]
        assert recorder.events[-3:] == ["release w3", "release w2", "release w1"]

    async def test_sequence_flips_list_of_handles(self, recorder: Recorder):
        handles = [recorder.resource("x"), recorder.resource("y")]
        result = await sequence(handles).run(lcr_ok)
        assert ok_value(result) == ["x", "y"]
        assert recorder.events == ["acquire x", "acquire y", "release y", "release x"]

    async def test_sequence_of_nothing(self):
        assert ok_value(await sequence([]).run(lcr_ok)) == []
