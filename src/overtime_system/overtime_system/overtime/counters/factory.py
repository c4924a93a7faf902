from __future__ import annotations

from typing import Dict, Type

from ...core.constants import DEFAULT_OVERTIME_COUNTER
from ...core.exceptions import ValidationError
from .base import MinuteCounter
from .interval_counter import IntervalArithmeticCounter
from .minute_counter import MinuteByMinuteCounter

_COUNTERS: Dict[str, Type[MinuteCounter]] = {
    MinuteByMinuteCounter.name: MinuteByMinuteCounter,
    IntervalArithmeticCounter.name: IntervalArithmeticCounter,
}


def build_counter(name: str | None = None) -> MinuteCounter:
    """Factory Pattern: pick the counting strategy by its configured name."""
    key = (name or DEFAULT_OVERTIME_COUNTER).strip().lower()
    try:
        return _COUNTERS[key]()
    except KeyError:
        raise ValidationError(f"Estrategia de conteo desconocida: {name!r} (use {', '.join(sorted(_COUNTERS))})")
