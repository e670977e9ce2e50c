from datetime import date, datetime, time

from classifier import classify_events
from models import SemesterGroup, SeminarRecord
from views.calendar import TABLE_COLUMNS, seminars_frame


def test_seminars_frame_keeps_workbook_order():
    groups = [
        SemesterGroup('WS 2026-27', [
            SeminarRecord(date=date(2026, 10, 5), raw_date='2026-10-05', speaker='Ada', start_time=time(14, 0)),
            SeminarRecord(date=date(2026, 11, 2), raw_date='2026-11-02', speaker='Alan'),
        ]),
        SemesterGroup('SS 2026', []),
        SemesterGroup('SS 2027', [SeminarRecord(raw_date='tba', speaker='Grace')]),
    ]
    classification = classify_events(groups, datetime(2026, 10, 18, 9, 0))

    df = seminars_frame(groups, classification)

    assert list(df.columns) == ['group', 'record'] + TABLE_COLUMNS
    assert df['speaker'].tolist() == ['Ada', 'Alan', 'Grace']
    assert df['semester'].tolist() == ['WS 2026-27', 'WS 2026-27', 'SS 2027']
    assert df['status'].tolist() == ['Past Event', 'Upcoming Event', '']
    assert df['date'].tolist() == ['5.10.2026', '2.11.2026', 'tba']
    assert df['start_time'].tolist() == ['2:00 PM', '', '']
    assert df[['group', 'record']].values.tolist() == [[0, 0], [0, 1], [2, 0]]


def test_seminars_frame_empty():
    groups = [SemesterGroup('SS 2026', [])]

    assert seminars_frame(groups, classify_events(groups, datetime(2026, 10, 18))).empty
