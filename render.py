"""HTML fragments for the schedule page, passed to ``st.markdown``."""

from html import escape

from formatting import format_display_date, format_time_range

EMPTY_SHEET_MESSAGE = "No entries in this sheet."


def display_date(record):
    # Unparseable dates are shown as typed
    return format_display_date(record.date) if record.date else record.raw_date


def escape_lines(text):
    # A blank line inside an HTML block would end it in Markdown
    return "<br>".join(escape(line) for line in text.splitlines())


def render_status(status):
    if status is None:
        return '<div class="seminar-status"></div>'
    return f'<div class="seminar-status {status.value}">{status.label}</div>'


def render_abstract(record, element_id):
    if not record.abstract_short and not record.abstract_long:
        return ""
    return (
        f'<details class="abstract" id="{escape(element_id)}">'
        f'<summary>{escape_lines(record.abstract_short)}<span class="dots"> [...]</span>'
        f'<span class="read-more-btn"></span></summary>'
        f'<span class="more-text">{escape_lines(record.abstract_long)}</span>'
        f'</details>'
    )


def render_entry(record, status, element_id):
    """One seminar: status label, date and speaker, title, time and place, abstract."""
    classes = "seminar-entry" + (f" {status.value}" if status else "")
    date_attr = record.date.isoformat() if record.date else record.raw_date

    parts = [
        f'<div class="{classes}" data-date="{escape(date_attr)}">',
        render_status(status),
        f'<div><strong>{escape(display_date(record))} — {escape(record.speaker)}</strong><br>'
        f'<em>{escape_lines(record.title)}</em></div>',
    ]

    meta = [text for text in (format_time_range(record.start_time, record.end_time), record.location) if text]
    if meta:
        parts.append(f'<div class="seminar-meta">{escape_lines(" · ".join(meta))}</div>')

    parts.append(render_abstract(record, element_id))
    parts.append('</div>')
    return "\n".join(part for part in parts if part)


def render_empty_sheet():
    return f'<p class="empty-sheet">{EMPTY_SHEET_MESSAGE}</p>'


def load_error_message(label, error):
    return f"Error loading {label}: {error}"


def render_details(record, semester, status):
    """Detail card for a seminar picked in the table view."""
    time_text = format_time_range(record.start_time, record.end_time) or 'N/A'
    return (
        f'<div class="seminar-details">'
        f'<h4>{escape(record.title or "N/A")}</h4>'
        f'<div class="seminar-info">'
        f'<div><span class="label">Semester:</span> {escape(semester)}</div>'
        f'<div><span class="label">Status:</span> {status.label if status else "N/A"}</div>'
        f'<div><span class="label">Date:</span> {escape(display_date(record) or "N/A")}</div>'
        f'<div><span class="label">Time:</span> {escape(time_text)}</div>'
        f'<div><span class="label">Speaker:</span> {escape(record.speaker or "N/A")}</div>'
        f'<div><span class="label">Room:</span> {escape(record.location or "N/A")}</div>'
        f'</div>'
        f'<p>{escape_lines(record.abstract_long or record.abstract_short)}</p>'
        f'</div>'
    )
