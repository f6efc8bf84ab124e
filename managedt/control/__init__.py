from .bracket import bracket, bracket_sync, bracket_writer, bracketM
from .policy import DEFAULT_RELEASE_POLICY, ReleasePolicy, SupersededHook

__all__ = (
    # Policy
    "ReleasePolicy",
    "SupersededHook",
    "DEFAULT_RELEASE_POLICY",
    # Bracket
    "bracket",
    "bracket_writer",
    "bracket_sync",
    "bracketM",
)
