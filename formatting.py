import re


def format_display_date(value):
    # German readers: day.month.year without zero padding
    if value is None:
        return ""
    return f"{value.day}.{value.month}.{value.year}"


def format_time_12h(value):
    """Render a time of day as ``h:mm AM/PM``."""
    if value is None:
        return ""
    hour = value.hour % 12 or 12
    suffix = "PM" if value.hour >= 12 else "AM"
    return f"{hour}:{value.minute:02d} {suffix}"


def format_time_range(start, end):
    if start is None:
        return ""
    if end is None:
        return format_time_12h(start)
    return f"{format_time_12h(start)} - {format_time_12h(end)}"


def make_sheet_slug(name):
    cleaned = re.sub(r"[^\w\- ]+", "", name)
    return re.sub(r"\s+", "_", cleaned)


def abstract_id(sheet_name, index):
    return f"{make_sheet_slug(sheet_name)}_{index}"
