import re
from typing import Optional

# Days and H/M/S only; no weeks, months or years. Deliberately unanchored.
ISO_DURATION_REGEX = re.compile(r'P(?:(\d+)D)?T?(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?')


def parse_duration(iso: Optional[str]) -> Optional[int]:
    """
    Convert an ISO-8601 duration like "PT1H30M" to whole minutes.

    Seconds round to the nearest minute (half up). Returns None only when
    there is nothing to match; "PT0S" is 0, not None.
    """
    if not iso:
        return None

    match = ISO_DURATION_REGEX.search(iso)
    if match is None:
        return None

    days, hours, minutes, seconds = (int(g) if g else 0 for g in match.groups())
    return days * 1440 + hours * 60 + minutes + (seconds + 30) // 60
