"""Calendar date parsing for aggregator queries."""
import logging
from datetime import date, datetime
from typing import Union

from errors import InvalidArgumentError

logger = logging.getLogger(__name__)

DATE_FORMATS = [
    '%Y-%m-%d',      # ISO 8601
    '%m/%d/%Y',      # US format
    '%m-%d-%Y',      # US format with dashes
    '%B %d, %Y',     # Full month name
    '%b %d, %Y',     # Abbreviated month name
    '%Y/%m/%d',      # Alternative ISO format
]


def parse_date(value: Union[date, datetime, str]) -> date:
    """
    Normalize a caller-supplied value to a calendar date.

    Any time-of-day component is discarded.

    Args:
        value: date, datetime, or date string in one of DATE_FORMATS
            (ISO 8601 datetimes are accepted as well)

    Returns:
        The calendar date

    Raises:
        InvalidArgumentError: If value is missing, blank, unparseable,
            or of an unsupported type
    """
    # datetime is a subclass of date, check it first
    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"Expected a date, datetime or date string, got {type(value).__name__}"
        )

    date_str = value.strip()
    if not date_str:
        raise InvalidArgumentError("Date string is empty")

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue

    try:
        return datetime.fromisoformat(date_str).date()
    except ValueError:
        pass

    logger.warning(f"Unrecognized date format: {value}")
    raise InvalidArgumentError(f"Invalid date format: {value}")
