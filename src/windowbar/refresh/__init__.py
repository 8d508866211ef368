"""Refresh loop: trigger source, signal channel and debounced recompute."""

from .loop import RefreshLoop
from .source import ProcessTriggerSource, TriggerSource
from .types import LoopState, Signal

__all__ = [
    "LoopState",
    "ProcessTriggerSource",
    "RefreshLoop",
    "Signal",
    "TriggerSource",
]
