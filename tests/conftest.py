from datetime import datetime

import pandas as pd
import pytest

HEADERS = ['Date', 'Speaker', 'Title', 'Abstract (short)', 'Abstract (long)', 'StartTime', 'EndTime', 'Location']


@pytest.fixture
def write_workbook(tmp_path):
    """Write ``{sheet name: [row tuples]}`` to an xlsx file and return its path."""
    def write(sheets, name='seminars.xlsx'):
        path = tmp_path / name
        with pd.ExcelWriter(path, engine='openpyxl') as writer:
            for sheet_name, rows in sheets.items():
                pd.DataFrame(rows, columns=HEADERS).to_excel(writer, sheet_name=sheet_name, index=False)
        return path
    return write


@pytest.fixture
def sample_sheets():
    return {
        'WS 2026-27': [
            ('2026-10-05', 'Ada Lovelace', 'Analytical Engines', 'Short intro', 'The long story', '14:00', '15:30', 'Room 101'),
            (datetime(2026, 11, 2), 'Alan Turing', 'Computable Numbers', 'On numbers', 'More on numbers', '09:00 AM', '10:00 AM', 'Hall B'),
        ],
        'SS 2026': [
            ('2026-04-20', 'Grace Hopper', 'Compilers', '', '', '', '', ''),
        ],
    }
