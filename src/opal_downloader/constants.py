"""Shared constants for date window resolution.

The target timezone, the historical origin of the data and the publication
lag of the upstream source are fixed for the whole system.
"""

from datetime import date

# Civil timezone all dates are interpreted in (NSW rule set)
TARGET_TIMEZONE = "Australia/Sydney"

# Earliest date for which source data exists
ORIGIN_DATE = date(2020, 1, 1)

# Days the upstream source may take to publish a day's data
PUBLICATION_LAG_DAYS = 5

# Calendar constants
MIN_MONTH = 1
MAX_MONTH = 12

# Process exit codes (sysexits.h)
EXIT_OK = 0
EX_USAGE = 64
EX_CONFIG = 78
