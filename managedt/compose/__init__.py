from .independent import independent, zip_with
from .sequential import sequential

__all__ = (
    "sequential",
    "independent",
    "zip_with",
)
