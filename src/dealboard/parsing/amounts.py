"""Currency/number parsing for mixed-locale sheet cells."""

import math
import re
from typing import Optional

_KEEP = re.compile(r"[^0-9.,\-]")
# "1.234.567,89" / "12,5": comma followed by 1-2 trailing digits is a decimal comma
_EUROPEAN = re.compile(r"^-?[\d.]+,\d{1,2}$")


def parse_amount(value: Optional[str]) -> Optional[float]:
    """Parse "$1,234.50", "1.234,50 EUR", "75%" etc.; None if empty or not a number."""
    if not value:
        return None
    cleaned = _KEEP.sub("", value)
    if not cleaned:
        return None
    if _EUROPEAN.match(cleaned):
        cleaned = cleaned.replace(".", "").replace(",", ".")
    else:
        cleaned = cleaned.replace(",", "")
    try:
        number = float(cleaned)
    except ValueError:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number
