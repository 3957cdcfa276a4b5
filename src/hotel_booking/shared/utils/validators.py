from datetime import date, datetime
from decimal import Decimal


def to_decimal(v: object) -> Decimal:
    """Convert an arbitrary value to Decimal

    Meant for pydantic field_validator (mode="before") and for values read
    back from DynamoDB. Decimals pass through, anything else goes through str.
    """
    if isinstance(v, Decimal):
        return v
    return Decimal(str(v))


def to_date(v: object) -> date | None:
    """Reduce a date-like value to a calendar date

    Accepts date, datetime and ISO 8601 strings. Aware datetimes are moved to
    the local timezone first so the calendar day matches the system's.
    Returns None for absent or unparseable values.
    """
    if v is None:
        return None
    if isinstance(v, datetime):
        if v.tzinfo is not None:
            v = v.astimezone()
        return v.date()
    if isinstance(v, date):
        return v
    if not isinstance(v, str) or not v.strip():
        return None
    s = v.strip()
    try:
        return date.fromisoformat(s)
    except ValueError:
        pass
    try:
        return to_date(datetime.fromisoformat(s.replace("Z", "+00:00")))
    except ValueError:
        return None
