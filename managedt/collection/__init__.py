from .fold import fold_collection, fold_collection_sync, fold_collection_writer, fold_collectionM
from .traverse import (
    sequence,
    sequence_sync,
    sequence_writer,
    sequenceM,
    traverse,
    traverse_sync,
    traverse_writer,
    traverseM,
)

__all__ = (
    # LazyCoroResult
    "fold_collection",
    "sequence",
    "traverse",
    # LazyCoroResultWriter
    "fold_collection_writer",
    "sequence_writer",
    "traverse_writer",
    # SyncResult
    "fold_collection_sync",
    "sequence_sync",
    "traverse_sync",
    # Generic
    "fold_collectionM",
    "sequenceM",
    "traverseM",
)
