"""Data models for event aggregation."""
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum


class EventCategory(Enum):
    """Subsystem an aggregated event originates from."""
    SPORT = 'Sport'
    MUSIC = 'Music'


@dataclass(frozen=True)
class SportRecord:
    """Match as stored by the sport subsystem."""
    match_name: str
    start_date: datetime
    duration: timedelta


@dataclass(frozen=True)
class MusicRecord:
    """Concert as stored by the music subsystem."""
    band: str
    start: datetime
    end: datetime


@dataclass(frozen=True)
class Event:
    """Normalized event returned by the aggregator."""
    title: str
    category: EventCategory
    starts_on: datetime
    ends_on: datetime
