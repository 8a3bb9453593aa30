"""Constants shared across the library."""

from datetime import timedelta

HOURS_PER_DAY = 24
MICROSECONDS_PER_HOUR = 3_600_000_000
ONE_DAY = timedelta(days=1)
ONE_MICROSECOND = timedelta(microseconds=1)

# Significant digits kept when an exact amount is rounded to Decimal.
DECIMAL_PRECISION = 28

# date.weekday(): Monday is 0, Sunday is 6.
WEEKEND_DAYS = frozenset({5, 6})

DEFAULT_TIMEZONE = "UTC"

PROFILES_DIRNAME = "profiles"
PROFILE_SUFFIX = ".json"
SCHEMA_FILENAME = "profile.schema.json"
