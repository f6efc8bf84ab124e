"""
Composable resource management over any effect type.

ManagedT is a deferred acquire/release pair built on a generalized
bracket. Handles compose sequentially (the next resource depends on the
previous one), independently (tuples) and by folding over collections of
unknown size; a composed handle releases in exact reverse acquisition
order, including when acquisition or use fails partway.

Architecture:
- Generic combinators (*M functions) take an EffectContext
- Sugar functions for LazyCoroResult (no suffix)
- Sugar functions for LazyCoroResultWriter (*_writer suffix)
- Sugar functions for SyncResult (*_sync suffix)

Known limitations:
- Cancellation is not supported. Cancelling an effect while it acquires,
  uses or releases may skip releases.
- Composition depth is bounded by the Python stack. Each nested handle
  adds frames, so a fold over a few hundred items (around a hundred on
  SYNC) can fail with Error(RecursionError).
"""

# Core types
from ._types import LCR, Combine, Release, Source, Use

# Effect contexts
from . import context
from .context import LAZY_CORO_RESULT, SYNC, WRITER, EffectContext, SyncResult

# Writer effect
from . import writer
from .writer import LazyCoroResultWriter, Log, WriterResult, writer_error, writer_ok

# Bracket
from .control import (
    DEFAULT_RELEASE_POLICY,
    ReleasePolicy,
    SupersededHook,
    bracket,
    bracket_sync,
    bracket_writer,
    bracketM,
)

# Resource handle
from .managed import (
    ManagedT,
    lift_pure,
    lift_pure_sync,
    lift_pure_writer,
    lift_pureM,
    make,
    make_sync,
    make_writer,
    makeM,
)

# Composition
from .compose import independent, sequential, zip_with
from .collection import (
    fold_collection,
    fold_collection_sync,
    fold_collection_writer,
    fold_collectionM,
    sequence,
    sequence_sync,
    sequence_writer,
    sequenceM,
    traverse,
    traverse_sync,
    traverse_writer,
    traverseM,
)

# Errors
from ._errors import EmptyCompositionError, Superseded

__all__ = (
    # Types
    "LCR",
    "Combine",
    "Release",
    "Source",
    "Use",
    # Effect contexts
    "context",
    "EffectContext",
    "LAZY_CORO_RESULT",
    "WRITER",
    "SYNC",
    "SyncResult",
    # Writer
    "writer",
    "LazyCoroResultWriter",
    "Log",
    "WriterResult",
    "writer_ok",
    "writer_error",
    # Bracket
    "ReleasePolicy",
    "SupersededHook",
    "DEFAULT_RELEASE_POLICY",
    "bracket",
    "bracket_writer",
    "bracket_sync",
    "bracketM",
    # Handle
    "ManagedT",
    "make",
    "make_writer",
    "make_sync",
    "makeM",
    "lift_pure",
    "lift_pure_writer",
    "lift_pure_sync",
    "lift_pureM",
    # Composition
    "sequential",
    "independent",
    "zip_with",
    "fold_collection",
    "fold_collection_writer",
    "fold_collection_sync",
    "fold_collectionM",
    "traverse",
    "traverse_writer",
    "traverse_sync",
    "traverseM",
    "sequence",
    "sequence_writer",
    "sequence_sync",
    "sequenceM",
    # Errors
    "EmptyCompositionError",
    "Superseded",
)
