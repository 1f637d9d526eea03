"""Data model for people records and their metrics."""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Any, Mapping

_U8_MAX = 255
_UNSIGNED = re.compile(r"\+?[0-9]+")


@dataclass
class Metric:
    """A named measurement with a value from 0 to 255."""

    name: str
    value: int


@dataclass
class Human:
    """A person record as stored and as used for search queries."""

    name: str
    id: str | None = None
    phone: str | None = None
    description: str | None = None
    label: list[str] | None = None
    metric: list[Metric] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the record as a JSON-ready dictionary."""
        data = asdict(self)
        return {
            "id": data["id"],
            "name": data["name"],
            "phone": data["phone"],
            "description": data["description"],
            "label": data["label"],
            "metric": data["metric"],
        }


def _parse_u8(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError("Value must be a valid number.")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError("Value must be a valid number.")
    return value


def parse_metric(text: str) -> Metric:
    """Parse a ``name:value`` string into a Metric."""
    parts = text.split(":")
    if len(parts) != 2:
        raise ValueError("Invalid format. Expected 'name:value'.")
    name, raw_value = parts
    return Metric(name=name, value=_parse_u8(raw_value))


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _metric_from_dict(data: Any) -> Metric:
    if not isinstance(data, Mapping):
        raise ValueError("metric entry must be an object")
    name = data.get("name")
    value = data.get("value")
    if not isinstance(name, str):
        raise ValueError("metric name must be a string")
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _U8_MAX:
        raise ValueError("metric value must be an integer from 0 to 255")
    return Metric(name=name, value=value)


def human_from_dict(data: Mapping[str, Any]) -> Human:
    """Build a Human from a decoded JSON object, validating field types."""
    if not isinstance(data, Mapping):
        raise ValueError("human record must be an object")
    name = data.get("name")
    if not isinstance(name, str):
        raise ValueError("field 'name' is required and must be a string")

    labels = data.get("label")
    if labels is not None:
        if not isinstance(labels, list) or not all(isinstance(item, str) for item in labels):
            raise ValueError("field 'label' must be a list of strings")
        labels = list(labels)

    metrics = data.get("metric")
    if metrics is not None:
        if not isinstance(metrics, list):
            raise ValueError("field 'metric' must be a list")
        metrics = [_metric_from_dict(item) for item in metrics]

    return Human(
        name=name,
        id=_optional_str(data, "id"),
        phone=_optional_str(data, "phone"),
        description=_optional_str(data, "description"),
        label=labels,
        metric=metrics,
    )