"""Label providers — how the engine asks for display strings.

A label provider is any callable ``t(key, fallback) -> str``.  The engine
never owns translations; it only passes a stable key and an English
fallback.
"""

from __future__ import annotations

from typing import Callable, Mapping

LabelProvider = Callable[[str, str], str]


def default_labels(key: str, fallback: str) -> str:
    """Return the English fallback for every key."""
    return fallback


class DictLabelProvider:
    """Look labels up in a flat ``{key: text}`` mapping."""

    def __init__(self, labels: Mapping[str, str]) -> None:
        self.labels = dict(labels)

    def __call__(self, key: str, fallback: str) -> str:
        return self.labels.get(key, fallback)
