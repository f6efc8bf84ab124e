"""
Core type definitions for managedt.

Aliases shared by the bracket, handle and composition modules.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from kungfu import LazyCoroResult, Result

# ============================================================================
# Type aliases
# ============================================================================

# Use = caller action over an acquired resource, producing an effect
type Use[R, M] = Callable[[R], M]

# Release = finalizer for an acquired resource, producing an effect
type Release[R, M] = Callable[[R], M]

# Combine = left-fold step merging an accumulator with one more resource
type Combine[S, R] = Callable[[S, R], S]

# Source = anything fold_collection accepts: a plain iterable, an absent
# optional (None) or an either-shaped Result where only Ok contributes
type Source[A] = Iterable[A] | Result[A, typing.Any] | None

# ============================================================================
# Concrete type shortcuts
# ============================================================================

# LCR = LazyCoroResult shortcut
type LCR[T, E] = LazyCoroResult[T, E]

__all__ = (
    "Use",
    "Release",
    "Combine",
    "Source",
    "LCR",
)
