# 📄 File: garden_tracker/shared/utils/helpers.py

# 🧭 Purpose (Layman Explanation):
# Small shortcuts used in many places: getting the current time in a single
# agreed timezone and tidying up text typed into forms.

# 🧪 Purpose (Technical Summary):
# Timezone normalization (everything is stored and compared in UTC) and
# whitespace cleanup for optional free-text fields.

# 🔗 Dependencies:
# - datetime

# 🔄 Connected Modules / Calls From:
# Used by: Plant domain model, watering services, command handlers,
# catalog import mapper

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime to aware UTC.

    Naive values are taken to already be UTC; aware values are converted.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def clean_optional_text(text: Optional[str]) -> Optional[str]:
    """Strip a free-text value, turning blank input into None."""
    if text is None:
        return None
    stripped = text.strip()
    return stripped or None
