"""
Release policy
==============

How bracket reports outcomes it throws away when release fails.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable
from dataclasses import dataclass

from .._errors import Superseded

# SupersededHook = observer for outcomes replaced by a release failure
type SupersededHook = Callable[[Superseded[typing.Any, typing.Any]], None]


@dataclass(frozen=True, slots=True)
class ReleasePolicy:
    """
    Reporting configuration for bracket.

    A release failure always wins over the use outcome; the policy only
    decides who hears about the loss. Every superseded outcome is logged at
    log_level and then passed to on_superseded, if set.
    """

    on_superseded: SupersededHook | None = None
    log_level: int = logging.WARNING

    def __post_init__(self) -> None:
        if self.log_level < logging.NOTSET:
            raise ValueError("ReleasePolicy.log_level must be >= 0")

    @classmethod
    def hooked(cls, hook: SupersededHook, *, log_level: int = logging.WARNING) -> ReleasePolicy:
        """Forward superseded outcomes to hook as well as the log."""
        return cls(on_superseded=hook, log_level=log_level)

    @classmethod
    def quiet(cls) -> ReleasePolicy:
        """Only log superseded outcomes at DEBUG."""
        return cls(log_level=logging.DEBUG)


DEFAULT_RELEASE_POLICY = ReleasePolicy()

__all__ = ("ReleasePolicy", "SupersededHook", "DEFAULT_RELEASE_POLICY")
