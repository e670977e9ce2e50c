from datetime import date, datetime, time, timedelta

import pytz
from icalendar import Calendar

from calendar_export import build_event_calendar
from config import Config
from models import SeminarRecord

CONFIG = Config()
STAMP = datetime(2026, 10, 18, 8, 0, tzinfo=pytz.UTC)


def only_event(payload):
    events = Calendar.from_ical(payload).walk('VEVENT')
    assert len(events) == 1
    return events[0]


def record(**kwargs):
    defaults = dict(date=date(2027, 6, 3), speaker='Ada Lovelace', title='Analytical Engines', location='Room 101')
    defaults.update(kwargs)
    return SeminarRecord(**defaults)


def test_undated_record_has_no_calendar():
    assert build_event_calendar(record(date=None), 'SS_2027', 0, CONFIG, stamp=STAMP) is None


def test_event_fields():
    event = only_event(build_event_calendar(record(start_time=time(14, 0), end_time=time(15, 30)), 'SS_2027', 4, CONFIG, stamp=STAMP))

    assert str(event['SUMMARY']) == 'Cluster Seminar: Ada Lovelace'
    assert str(event['DESCRIPTION']) == 'Analytical Engines'
    assert str(event['LOCATION']) == 'Room 101'
    assert str(event['UID']) == 'SS_2027-4@seminar-schedule'


def test_timed_event_is_localized():
    event = only_event(build_event_calendar(record(start_time=time(14, 0), end_time=time(15, 30)), 'SS_2027', 0, CONFIG, stamp=STAMP))
    start = event.decoded('DTSTART')
    end = event.decoded('DTEND')

    assert (start.hour, start.minute) == (14, 0)
    assert start.utcoffset() == timedelta(hours=2)
    assert end - start == timedelta(minutes=90)


def test_missing_end_uses_default_duration():
    config = Config(event_duration_minutes=45)
    event = only_event(build_event_calendar(record(start_time=time(14, 0)), 'SS_2027', 0, config, stamp=STAMP))

    assert event.decoded('DTEND') - event.decoded('DTSTART') == timedelta(minutes=45)


def test_end_before_start_uses_default_duration():
    event = only_event(build_event_calendar(record(start_time=time(14, 0), end_time=time(13, 0)), 'SS_2027', 0, CONFIG, stamp=STAMP))

    assert event.decoded('DTEND') - event.decoded('DTSTART') == timedelta(minutes=60)


def test_without_start_time_is_all_day():
    event = only_event(build_event_calendar(record(), 'SS_2027', 0, CONFIG, stamp=STAMP))
    start = event.decoded('DTSTART')

    assert not isinstance(start, datetime)
    assert start == date(2027, 6, 3)
    assert event.decoded('DTEND') == date(2027, 6, 4)


def test_custom_prefix():
    config = Config(event_prefix='Colloquium')
    event = only_event(build_event_calendar(record(), 'SS_2027', 0, config, stamp=STAMP))

    assert str(event['SUMMARY']) == 'Colloquium: Ada Lovelace'
