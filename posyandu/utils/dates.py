import logging
import re
from datetime import date, datetime
from typing import Optional

logger = logging.getLogger(__name__)

DMY_PATTERN = re.compile(r"^(\d{1,2})[/-](\d{1,2})[/-](\d{4})$")


def normalize_date_string(value: Optional[str]) -> Optional[str]:
    """
    Normalise a free-form date to ``YYYY-MM-DD``.

    Accepts day-first ``D/M/YYYY`` or ``D-M-YYYY`` (as typed on the forms and
    found in imported sheets) and ISO dates or timestamps. Returns ``None``
    when the value cannot be read or the year is outside 1901-2099.
    """
    if not value:
        return None
    value = value.strip()

    match = DMY_PATTERN.match(value)
    if match:
        day, month, year = (int(part) for part in match.groups())
        try:
            return date(year, month, day).isoformat()
        except ValueError:
            logger.debug(f"Not a calendar date: {value!r}")

    try:
        parsed = datetime.fromisoformat(value).date()
    except ValueError:
        return None

    if 1900 < parsed.year < 2100:
        return parsed.isoformat()
    return None
