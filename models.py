# models.py

from dataclasses import dataclass, field
from datetime import date, time
from enum import Enum
from typing import Dict, List, Optional, Tuple


@dataclass
class SeminarRecord:
    date: Optional[date] = None
    speaker: str = ""
    title: str = ""
    abstract_short: str = ""
    abstract_long: str = ""
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    location: str = ""
    raw_date: str = ""


@dataclass
class SemesterGroup:
    name: str
    records: List[SeminarRecord] = field(default_factory=list)


class EventStatus(Enum):
    PAST = "past"
    UPCOMING = "upcoming"
    FUTURE = "future"

    @property
    def label(self):
        return f"{self.value.capitalize()} Event"


@dataclass
class Classification:
    """Status of every dated record, keyed by (group index, record index)."""
    statuses: Dict[Tuple[int, int], EventStatus] = field(default_factory=dict)
    upcoming: Optional[Tuple[int, int]] = None
    expanded_group: Optional[int] = None

    def status_of(self, group_index, record_index):
        return self.statuses.get((group_index, record_index))
