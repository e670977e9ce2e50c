from datetime import datetime, time
import logging

import pytz

from models import Classification, EventStatus

# Seminar days are compared at midday so a talk stays "upcoming" through the morning.
MIDDAY = time(12, 0)


def current_time(timezone_name):
    """Wall-clock time in the given zone as a naive datetime."""
    return datetime.now(pytz.timezone(timezone_name)).replace(tzinfo=None)


def classify_events(groups, now):
    """
    Mark every dated record as past, upcoming or future.

    Groups are walked in workbook order and records in source order. The first
    record on or after ``now`` is the upcoming one; every later non-past record
    is future. Records without a usable date are left out entirely. The group
    holding the upcoming record is the one to expand, falling back to the first
    group when everything is past.
    """
    result = Classification()

    for group_index, group in enumerate(groups):
        for record_index, record in enumerate(group.records):
            if record.date is None:
                continue

            position = (group_index, record_index)
            moment = datetime.combine(record.date, MIDDAY)
            if moment < now:
                result.statuses[position] = EventStatus.PAST
            elif result.upcoming is None:
                result.statuses[position] = EventStatus.UPCOMING
                result.upcoming = position
            else:
                result.statuses[position] = EventStatus.FUTURE

    if result.upcoming is not None:
        result.expanded_group = result.upcoming[0]
    elif groups:
        result.expanded_group = 0

    logging.info(f"Classified {len(result.statuses)} seminars, upcoming at {result.upcoming}")
    return result
