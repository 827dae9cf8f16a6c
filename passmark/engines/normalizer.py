"""Value normalizer for raw assessment cells."""

import math
from typing import Any


def normalize_value(raw: Any) -> str:
    """Convert a raw cell value to a trimmed string for pattern matching.

    None and NaN (blank spreadsheet cells) become "". Integral floats drop
    their fractional part so a score read as 85.0 matches like "85". No
    case folding happens here.
    """
    if raw is None:
        return ""
    if isinstance(raw, float):
        if math.isnan(raw):
            return ""
        if raw.is_integer():
            return str(int(raw))
    return str(raw).strip()
