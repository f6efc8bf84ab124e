from __future__ import annotations

from dataclasses import dataclass

from kungfu import Result


class EmptyCompositionError(TypeError):
    """independent() was called without handles, so there is no effect context."""

    def __init__(self) -> None:
        super().__init__("independent() needs at least one handle")


@dataclass(frozen=True, slots=True)
class Superseded[T, E]:
    """
    Outcome of a use step that was thrown away because release failed.

    outcome is Ok(value) when use succeeded, Error(e) when it failed.
    release_error is the failure that replaced it.
    """

    outcome: Result[T, E]
    release_error: E

    def __str__(self) -> str:
        return f"release failure {self.release_error!r} superseded {self.outcome!r}"


__all__ = ("EmptyCompositionError", "Superseded")
