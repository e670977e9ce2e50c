"""Runtime settings for the seminar schedule, read from the environment."""

import os
from dataclasses import dataclass

import pytz
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@dataclass(frozen=True)
class Config:
    workbook: str = "seminars.xlsx"
    timezone: str = "Europe/Berlin"
    event_prefix: str = "Cluster Seminar"
    event_duration_minutes: int = 60
    cache_ttl_seconds: int = 300
    uid_domain: str = "seminar-schedule"


def _int_env(name, default):
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


def get_config():
    """Build the configuration from ``SEMINAR_*`` environment variables."""
    timezone = os.getenv("SEMINAR_TIMEZONE", Config.timezone)
    if timezone not in pytz.all_timezones_set:
        raise ValueError(f"Unknown timezone: {timezone}")

    return Config(
        workbook=os.getenv("SEMINAR_WORKBOOK", Config.workbook),
        timezone=timezone,
        event_prefix=os.getenv("SEMINAR_EVENT_PREFIX", Config.event_prefix),
        event_duration_minutes=_int_env("SEMINAR_EVENT_DURATION", Config.event_duration_minutes),
        cache_ttl_seconds=_int_env("SEMINAR_CACHE_TTL", Config.cache_ttl_seconds),
        uid_domain=os.getenv("SEMINAR_UID_DOMAIN", Config.uid_domain),
    )
