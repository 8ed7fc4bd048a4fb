"""Utility constants for tscal.

Time unit constants represent durations in seconds. Calendar constants
describe the supported window, which starts on 2000-03-01 so that the
leap day always lands on the last day of a March-based year.
"""

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400

SECONDS_PER_DAY = DAY

# Day counts per Gregorian cycle
DAYS_PER_YEAR = 365
DAYS_PER_4_YEARS = 1461  # 365 * 4 + 1
DAYS_PER_100_YEARS = 36524  # 365 * 100 + 24
DAYS_PER_400_YEARS = 146097  # 365 * 400 + 97

# Supported window
BASE_YEAR = 2000
BASE_TIMESTAMP = 951868800  # 2000-03-01T00:00:00Z
LAST_TIMESTAMP = 13569465599  # 2399-12-31T23:59:59Z
