import logging
from datetime import date, datetime, time as dtime, tzinfo
from typing import Optional

from core.errors import ParseError

log = logging.getLogger("rubenrss.dates")

FRENCH_MONTHS = {
    "janvier": "01", "février": "02", "mars": "03", "avril": "04",
    "mai": "05", "juin": "06", "juillet": "07", "août": "08",
    "septembre": "09", "octobre": "10", "novembre": "11", "décembre": "12",
}
# Orthographes sans accent vues dans le texte saisi a la main
FRENCH_MONTHS.update({"fevrier": "02", "aout": "08", "decembre": "12"})


def parse_french_date(text: str) -> date:
    """Parse a date written like "19 mai 2025"."""
    parts = (text or "").split()
    if len(parts) < 3:
        raise ParseError(f"cannot parse date: {text!r}")
    day, month_name, year = parts[0], parts[1], parts[2]
    month = FRENCH_MONTHS.get(month_name.lower())
    if month is None:
        raise ParseError(f"unknown month {month_name!r} in {text!r}")
    if not day.isdigit() or len(day) > 2:
        raise ParseError(f"invalid day {day!r} in {text!r}")
    iso = f"{year}-{month}-{day.zfill(2)}"
    try:
        return datetime.strptime(iso, "%Y-%m-%d").date()
    except ValueError as e:
        raise ParseError(f"invalid date {text!r}: {e}") from e


def published_at_from(date_text: str, tz: tzinfo, now: Optional[datetime] = None) -> datetime:
    """Midnight of the parsed date in ``tz``, or ``now`` when the text is unusable."""
    if now is None:
        now = datetime.now(tz)
    if not date_text:
        return now
    try:
        d = parse_french_date(date_text)
    except ParseError as e:
        log.debug("Date illisible, heure courante utilisee: %s", e)
        return now
    return datetime.combine(d, dtime.min, tzinfo=tz)
