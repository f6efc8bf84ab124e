from .base import EffectContext, defer
from .lazy import LAZY_CORO_RESULT
from .sync import SYNC, SyncResult
from .writer import WRITER

__all__ = (
    "EffectContext",
    "defer",
    "LAZY_CORO_RESULT",
    "WRITER",
    "SYNC",
    "SyncResult",
)
