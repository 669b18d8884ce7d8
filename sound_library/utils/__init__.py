"""Utility modules for events and sound identifiers."""

from .events import ReplaySignal, Signal, Subscription

__all__ = [
    "ReplaySignal",
    "Signal",
    "Subscription",
]
