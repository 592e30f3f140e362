# 📄 File: garden_tracker/modules/plant_management/domain/services/watering_schedule.py
# 🧭 Purpose (Layman Explanation):
# Works out when a plant needs water next, and turns rough catalog hints such as
# "every 1-2 weeks" or "average" into a number of days.
# 🧪 Purpose (Technical Summary):
# Pure, deterministic schedule calculator. compute_next_watering is the one and
# only implementation of the next-watering derivation; every write path (create,
# edit, water one, water all, catalog import) goes through it.
# 🔗 Dependencies:
# datetime, re
# 🔄 Connected Modules / Calls From:
# watering_service.py, plant command handlers, plant_catalog import mapper

import re
from datetime import datetime, timedelta
from typing import Any, Mapping, Optional, Union

# Days per unit for catalog watering benchmarks; anything else counts as days
UNIT_MULTIPLIERS = (
    ("week", 7),
    ("month", 30),
)

# Catalog "watering" labels (Perenual: Frequent / Average / Minimum / None)
LABEL_FREQUENCIES = {
    "frequent": 3,
    "average": 7,
    "minimum": 14,
    "none": None,
}

_FIRST_INTEGER = re.compile(r"\d+")


def compute_next_watering(
    last_watered: Optional[datetime],
    frequency_days: Optional[int],
) -> Optional[datetime]:
    """
    Derive the next watering date from the last watering and the frequency.

    Calendar-day addition: the result keeps the time of day and timezone of
    ``last_watered`` and lands exactly ``frequency_days`` days later.

    Args:
        last_watered: When the plant was last watered, or None
        frequency_days: Days between waterings, or None

    Returns:
        The next watering datetime, or None when either input is missing or
        the frequency is not a positive whole number.
    """
    if last_watered is None or frequency_days is None:
        return None
    if isinstance(frequency_days, bool) or not isinstance(frequency_days, int):
        return None
    if frequency_days <= 0:
        return None
    return last_watered + timedelta(days=frequency_days)


def _benchmark_field(benchmark: Any, name: str) -> Any:
    if isinstance(benchmark, Mapping):
        return benchmark.get(name)
    return getattr(benchmark, name, None)


def _days_from_benchmark(benchmark: Any) -> Optional[int]:
    """Parse ``{value, unit}``; None when the value holds no integer."""
    value = _benchmark_field(benchmark, "value")
    if value is None:
        return None

    match = _FIRST_INTEGER.search(str(value))
    if match is None:
        return None

    amount = int(match.group())
    unit = str(_benchmark_field(benchmark, "unit") or "").lower()
    for unit_name, multiplier in UNIT_MULTIPLIERS:
        if unit_name in unit:
            return amount * multiplier
    return amount


def estimate_frequency_from_hint(
    benchmark: Optional[Union[Mapping[str, Any], Any]] = None,
    label: Optional[str] = None,
) -> Optional[int]:
    """
    Estimate a watering frequency in days from catalog hints.

    The structured benchmark wins when it parses: the first integer in its
    value ("5-7" gives 5) scaled by its unit (weeks x7, months x30, else days).
    Otherwise the descriptive label is used: frequent=3, average=7,
    minimum=14, none=None. This is a heuristic; callers present it to users
    as an estimate.

    Args:
        benchmark: Mapping or object with ``value`` and ``unit``
        label: Descriptive watering label, matched case-insensitively

    Returns:
        Positive number of days, or None when nothing usable was given.
    """
    if benchmark is not None:
        days = _days_from_benchmark(benchmark)
        if days is not None:
            return days if days > 0 else None

    if label is None:
        return None
    return LABEL_FREQUENCIES.get(str(label).strip().lower())
