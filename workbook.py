import io
import logging
from datetime import date, datetime, time
from pathlib import Path

import pandas as pd
import requests

from models import SemesterGroup, SeminarRecord

COLUMNS = {
    'date': 'Date',
    'speaker': 'Speaker',
    'title': 'Title',
    'abstract_short': 'Abstract (short)',
    'abstract_long': 'Abstract (long)',
    'start_time': 'StartTime',
    'end_time': 'EndTime',
    'location': 'Location',
}

TIME_FORMATS = ('%H:%M', '%H:%M:%S', '%I:%M %p', '%I:%M%p')


class WorkbookLoadError(Exception):
    """The workbook could not be fetched or parsed."""


def _is_blank(value):
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _text(value):
    return "" if _is_blank(value) else str(value).strip()


def parse_date(value):
    """Turn a Date cell into a ``date``; anything unusable becomes None."""
    if _is_blank(value):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    parsed = pd.to_datetime(text, format='%Y-%m-%d', errors='coerce')
    if pd.isna(parsed):
        logging.debug(f"Ignoring malformed date {text!r}")
        return None
    return parsed.date()


def parse_time(value):
    """
    Turn a StartTime/EndTime cell into a ``time``.

    Accepts Excel times and datetimes, Excel day fractions, ``HH:MM`` and
    ``h:mm AM/PM`` text. Anything else becomes None.
    """
    if _is_blank(value):
        return None
    if isinstance(value, datetime):
        return value.time()
    if isinstance(value, time):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if 0 <= value < 1:
            minutes = min(int(round(value * 24 * 60)), 24 * 60 - 1)
            return time(minutes // 60, minutes % 60)
        logging.debug(f"Ignoring out of range time {value!r}")
        return None

    text = str(value).strip()
    for time_format in TIME_FORMATS:
        parsed = pd.to_datetime(text, format=time_format, errors='coerce')
        if not pd.isna(parsed):
            return parsed.time()

    logging.debug(f"Ignoring malformed time {text!r}")
    return None


def record_from_row(row):
    raw_date = row.get(COLUMNS['date'])
    parsed_date = parse_date(raw_date)
    if parsed_date is not None and isinstance(raw_date, date):
        raw_date = parsed_date.isoformat()

    return SeminarRecord(
        date=parsed_date,
        speaker=_text(row.get(COLUMNS['speaker'])),
        title=_text(row.get(COLUMNS['title'])),
        abstract_short=_text(row.get(COLUMNS['abstract_short'])),
        abstract_long=_text(row.get(COLUMNS['abstract_long'])),
        start_time=parse_time(row.get(COLUMNS['start_time'])),
        end_time=parse_time(row.get(COLUMNS['end_time'])),
        location=_text(row.get(COLUMNS['location'])),
        raw_date=_text(raw_date),
    )


class SeminarWorkbook:
    def __init__(self, source='seminars.xlsx', timeout=10):
        self.source = source
        self.timeout = timeout

    @property
    def label(self):
        if isinstance(self.source, (bytes, bytearray)):
            return "uploaded workbook"
        return str(self.source)

    def fetch(self):
        """Return the raw workbook bytes from a URL, a local path or memory."""
        if isinstance(self.source, (bytes, bytearray)):
            return bytes(self.source)

        source = str(self.source)
        if source.startswith(('http://', 'https://')):
            try:
                response = requests.get(source, timeout=self.timeout)
            except requests.RequestException as e:
                raise WorkbookLoadError(f"Request failed: {e}") from e
            if not response.ok:
                raise WorkbookLoadError(f"Server returned status {response.status_code}")
            return response.content

        # Messages carry the reason only; the page prefixes the source
        try:
            return Path(source).read_bytes()
        except OSError as e:
            raise WorkbookLoadError(f"Could not read file: {e.strerror or e}") from e

    def read_sheets(self, content):
        try:
            return pd.read_excel(io.BytesIO(content), sheet_name=None, engine='openpyxl')
        except Exception as e:
            raise WorkbookLoadError(f"Could not parse workbook: {e}") from e

    def load(self):
        """Fetch the workbook and return one SemesterGroup per sheet, in workbook order."""
        sheets = self.read_sheets(self.fetch())

        groups = []
        for sheet_name, df in sheets.items():
            df = df.dropna(how='all')
            df.columns = [str(column).strip() for column in df.columns]
            records = [record_from_row(row) for row in df.to_dict('records')]
            groups.append(SemesterGroup(name=str(sheet_name), records=records))
            logging.info(f"Loaded {len(records)} seminars from sheet {sheet_name!r}")

        return groups
