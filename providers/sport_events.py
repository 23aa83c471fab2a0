"""In-memory sport event subsystem."""
import logging
from datetime import date, datetime, timedelta
from typing import List, Optional, Sequence

from aggregator.models import SportRecord

logger = logging.getLogger(__name__)

SAMPLE_SPORT_RECORDS = (
    SportRecord(
        match_name="Canadien vs Mapple Leafs",
        start_date=datetime(2018, 1, 10, 10, 0, 0),
        duration=timedelta(hours=2)
    ),
    SportRecord(
        match_name="Broncos vs Texans",
        start_date=datetime(2018, 1, 12, 16, 0, 0),
        duration=timedelta(hours=3)
    ),
)


class SportEventProvider:
    """Read-only source of sport matches."""

    def __init__(self, records: Optional[Sequence[SportRecord]] = None):
        """
        Initialize the provider.

        Args:
            records: Matches to serve (default: SAMPLE_SPORT_RECORDS)
        """
        self._records = tuple(
            SAMPLE_SPORT_RECORDS if records is None else records
        )

    def query_by_date(self, query_date: date) -> List[SportRecord]:
        """
        Return matches starting on the given calendar date.

        Args:
            query_date: Calendar date to filter on

        Returns:
            Matching SportRecord objects, in storage order
        """
        matches = [
            record for record in self._records
            if record.start_date.date() == query_date
        ]
        logger.debug(f"Found {len(matches)} sport records for {query_date}")
        return matches
