"""In-memory music event subsystem."""
import logging
from datetime import date, datetime
from typing import List, Optional, Sequence

from aggregator.models import MusicRecord

logger = logging.getLogger(__name__)

SAMPLE_MUSIC_RECORDS = (
    MusicRecord(
        band="Celine Dion",
        start=datetime(2018, 1, 6, 18, 0, 0),
        end=datetime(2018, 1, 10, 22, 0, 0)
    ),
    MusicRecord(
        band="Bon Jovi",
        start=datetime(2018, 1, 10, 18, 0, 0),
        end=datetime(2018, 1, 10, 22, 0, 0)
    ),
)


class MusicEventProvider:
    """Read-only source of concerts."""

    def __init__(self, records: Optional[Sequence[MusicRecord]] = None):
        self._records = tuple(
            SAMPLE_MUSIC_RECORDS if records is None else records
        )

    def query_by_date(self, query_date: date) -> List[MusicRecord]:
        """Return concerts whose start falls on the given calendar date."""
        matches = [
            record for record in self._records
            if record.start.date() == query_date
        ]
        logger.debug(f"Found {len(matches)} music records for {query_date}")
        return matches
