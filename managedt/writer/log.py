"""
Log - monoidal accumulator for the writer effect
================================================
"""

from __future__ import annotations


class Log[A](list[A]):
    """
    Append-only log carried alongside a writer computation.

    Monoid: Log() is the identity, combine is concatenation, so logs from
    acquire, use and release steps concatenate in execution order.
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        return Log[T](items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """Concatenate: Log.of("acquire").combine(Log.of("release"))."""
        merged: Log[A] = Log(self)
        merged.extend(other)
        return merged


__all__ = ("Log",)
