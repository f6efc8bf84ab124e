"""
Sequential composition
======================

The second resource is built from the first: acquire R1, acquire R2 inside
R1's use, run use on R2, release R2, release R1.
"""

from __future__ import annotations

from collections.abc import Callable

from ..managed import ManagedT


def sequential[M, R1, R2](
    first: ManagedT[M, R1],
    f: Callable[[R1], ManagedT[M, R2]],
) -> ManagedT[M, R2]:
    """
    first.run(r1 -> f(r1).run(use)).

    f runs inside first's use step, so a failure in f or in the second
    handle still releases r1.
    """
    ctx = first.ctx

    def second_for(resource: R1) -> ManagedT[M, R2]:
        second = f(resource)
        if second.ctx is not ctx:
            raise TypeError(f"sequential: expected a handle over {ctx!r}, got {second.ctx!r}")
        return second

    def run(use: Callable[[R2], M]) -> M:
        return first.run(lambda resource: second_for(resource).run(use))

    return ManagedT(ctx, run)


__all__ = ("sequential",)
