from datetime import datetime, timedelta

import pytz
from icalendar import Calendar, Event


def event_window(record, config):
    """Start and end of a timed seminar, localized to the configured zone."""
    tz = pytz.timezone(config.timezone)
    start = tz.localize(datetime.combine(record.date, record.start_time))
    if record.end_time is not None:
        end = tz.localize(datetime.combine(record.date, record.end_time))
        if end > start:
            return start, end
    return start, start + timedelta(minutes=config.event_duration_minutes)


def build_event_calendar(record, slug, index, config, stamp=None):
    """
    Build a single-event iCalendar file for an "Add to Calendar" button.

    Records without a date have nothing to add and give None. Records without
    a start time become all-day events.
    """
    if record.date is None:
        return None

    cal = Calendar()
    cal.add('prodid', '-//Seminar Schedule//EN')
    cal.add('version', '2.0')

    event = Event()
    event.add('uid', f"{slug}-{index}@{config.uid_domain}")
    event.add('dtstamp', stamp or datetime.now(pytz.UTC))
    event.add('summary', f"{config.event_prefix}: {record.speaker}")
    event.add('description', record.title)
    event.add('location', record.location)

    if record.start_time is None:
        event.add('dtstart', record.date)
        event.add('dtend', record.date + timedelta(days=1))
    else:
        start, end = event_window(record, config)
        event.add('dtstart', start)
        event.add('dtend', end)

    cal.add_component(event)
    return cal.to_ical()
