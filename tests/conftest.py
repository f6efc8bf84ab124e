from __future__ import annotations

import typing
from dataclasses import dataclass, field

import pytest
from kungfu import Error, LazyCoroResult, Ok, Result

from managedt import LazyCoroResultWriter, ManagedT, SyncResult, make, make_sync, make_writer, writer_error, writer_ok


def ok_value(result: Result[typing.Any, typing.Any]) -> typing.Any:
    match result:
        case Ok(value):
            return value
        case _:
            pytest.fail(f"expected Ok, got {result!r}")


def error_value(result: Result[typing.Any, typing.Any]) -> typing.Any:
    match result:
        case Error(error):
            return error
        case _:
            pytest.fail(f"expected Error, got {result!r}")


def lcr_ok[T](value: T) -> LazyCoroResult[T, typing.Any]:
    async def run() -> Result[T, typing.Any]:
        return Ok(value)

    return LazyCoroResult(run)


def lcr_error[E](error: E) -> LazyCoroResult[typing.Any, E]:
    async def run() -> Result[typing.Any, E]:
        return Error(error)

    return LazyCoroResult(run)


@dataclass(slots=True)
class Recorder:
    """Fake resources that append lifecycle events to a shared log."""

    events: list[str] = field(default_factory=list)

    def resource(
        self,
        name: str,
        *,
        acquire_error: str | None = None,
        release_error: str | None = None,
    ) -> ManagedT[LazyCoroResult[typing.Any, typing.Any], str]:
        async def acquire() -> Result[str, str]:
            if acquire_error is not None:
                return Error(acquire_error)
            self.events.append(f"acquire {name}")
            return Ok(name)

        def release(resource: str) -> LazyCoroResult[None, str]:
            async def run() -> Result[None, str]:
                self.events.append(f"release {resource}")
                if release_error is not None:
                    return Error(release_error)
                return Ok(None)

            return LazyCoroResult(run)

        return make(LazyCoroResult(acquire), release=release)

    def sync_resource(
        self,
        name: str,
        *,
        acquire_error: str | None = None,
        release_error: str | None = None,
    ) -> ManagedT[SyncResult[typing.Any, typing.Any], str]:
        def acquire() -> Result[str, str]:
            if acquire_error is not None:
                return Error(acquire_error)
            self.events.append(f"acquire {name}")
            return Ok(name)

        def release(resource: str) -> SyncResult[None, str]:
            def run() -> Result[None, str]:
                self.events.append(f"release {resource}")
                if release_error is not None:
                    return Error(release_error)
                return Ok(None)

            return SyncResult(run)

        return make_sync(SyncResult(acquire), release=release)

    def use(self, tag: str = "use") -> typing.Callable[[typing.Any], LazyCoroResult[typing.Any, typing.Any]]:
        """Use action that records itself and succeeds with the resource."""

        def run_use(resource: typing.Any) -> LazyCoroResult[typing.Any, typing.Any]:
            async def run() -> Result[typing.Any, typing.Any]:
                self.events.append(f"{tag} {resource}")
                return Ok(resource)

            return LazyCoroResult(run)

        return run_use


def logged_resource(
    name: str,
    *,
    release_error: str | None = None,
) -> ManagedT[LazyCoroResultWriter[typing.Any, typing.Any, str], str]:
    """Writer resource: lifecycle events go to the writer log, not a side list."""

    def release(resource: str) -> LazyCoroResultWriter[None, str, str]:
        if release_error is not None:
            return writer_error(release_error, f"release {resource}")
        return writer_ok(None, f"release {resource}")

    return make_writer(LazyCoroResultWriter.tell(f"acquire {name}").map(lambda _: name), release=release)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
