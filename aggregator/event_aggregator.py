"""Facade that merges sport and music events into one chronological view."""
import logging
from datetime import date, datetime
from typing import Optional, Tuple, Union

from aggregator.dates import parse_date
from aggregator.models import Event, EventCategory, MusicRecord, SportRecord
from providers.music_events import MusicEventProvider
from providers.sport_events import SportEventProvider

logger = logging.getLogger(__name__)


def map_sport_record(record: SportRecord) -> Event:
    """Normalize a sport match; the end is derived from its duration."""
    return Event(
        title=record.match_name,
        category=EventCategory.SPORT,
        starts_on=record.start_date,
        ends_on=record.start_date + record.duration
    )


def map_music_record(record: MusicRecord) -> Event:
    """Normalize a concert."""
    return Event(
        title=record.band,
        category=EventCategory.MUSIC,
        starts_on=record.start,
        ends_on=record.end
    )


class EventAggregator:
    """Single entry point over the sport and music subsystems."""

    def __init__(
        self,
        sport_provider: Optional[SportEventProvider] = None,
        music_provider: Optional[MusicEventProvider] = None
    ):
        """
        Initialize the aggregator.

        Args:
            sport_provider: Sport subsystem (default: sample data provider)
            music_provider: Music subsystem (default: sample data provider)
        """
        self._sport_provider = sport_provider or SportEventProvider()
        self._music_provider = music_provider or MusicEventProvider()

    def find_events_for_date(
        self, query_date: Union[date, datetime, str]
    ) -> Tuple[Event, ...]:
        """
        Find all events starting on a calendar date.

        Sport events precede music events that start at the same moment.

        Args:
            query_date: Target date; any time-of-day component is ignored

        Returns:
            Tuple of Event objects ordered by start time (empty if none match)

        Raises:
            InvalidArgumentError: If query_date cannot be interpreted as a date
        """
        target = parse_date(query_date)

        events = [
            map_sport_record(record)
            for record in self._sport_provider.query_by_date(target)
        ]
        events.extend(
            map_music_record(record)
            for record in self._music_provider.query_by_date(target)
        )

        # sorted() is stable
        ordered = tuple(sorted(events, key=lambda event: event.starts_on))

        logger.info(f"Found {len(ordered)} events for {target.isoformat()}")
        return ordered
