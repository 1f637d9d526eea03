"""Filtering of stored people by name, description, labels and metrics."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

from hrcli.models import Human
from hrcli.storage import Storage


def normalize_pattern(pattern: str | None) -> str | None:
    """Return None for a missing or empty pattern, else the pattern."""
    return pattern or None


def _wildcard_to_regex(pattern: str) -> str:
    def convert(ch: str) -> str:
        if ch == "*":
            return ".*"
        if ch == "?":
            return "."
        return re.escape(ch)

    return "".join(convert(ch) for ch in pattern)


def wildcard_matches(pattern: str, text: str) -> bool:
    """Match the whole text against a pattern with ``*`` and ``?`` wildcards."""
    return re.fullmatch(_wildcard_to_regex(pattern), text) is not None


def labels_match(candidate: Human, required: Iterable[str]) -> bool:
    """Return True if the candidate carries every required label."""
    have = set(candidate.label or ())
    return all(label in have for label in required)


def _metric_map(human: Human) -> dict[str, int]:
    return {m.name: m.value for m in human.metric or ()}


def metrics_meet(candidate: Human, minimums: Mapping[str, int]) -> bool:
    """Return True if each required metric is present and at least its minimum."""
    have = _metric_map(candidate)
    return all(name in have and have[name] >= low for name, low in minimums.items())


def human_matches(
    human: Human,
    name_pattern: str | None,
    required_labels: Iterable[str],
    min_metrics: Mapping[str, int],
) -> bool:
    """Check the name pattern, required labels and metric minimums."""
    if name_pattern is not None and not wildcard_matches(name_pattern, human.name):
        return False
    return labels_match(human, required_labels) and metrics_meet(human, min_metrics)


def description_matches(human: Human, pattern: str | None) -> bool:
    """Return True if no pattern is given or the description matches it."""
    if pattern is None:
        return True
    return human.description is not None and wildcard_matches(pattern, human.description)


def extract_min_metrics(query: Human) -> dict[str, int]:
    """Map each metric name in the query to its minimum value."""
    return _metric_map(query)


def search(storage: Storage, query: Human) -> list[Human]:
    """Return the stored people that satisfy every filter in the query."""
    name_pattern = query.name or None
    desc_pattern = normalize_pattern(query.description)
    required_labels = list(query.label or ())
    min_metrics = extract_min_metrics(query)
    return [
        human
        for human in storage.load_all()
        if human_matches(human, name_pattern, required_labels, min_metrics)
        and description_matches(human, desc_pattern)
    ]