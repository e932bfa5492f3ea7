"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
DEFAULT_REPORT_DAYS = 7
DEFAULT_REPORT_INTERVAL_SECONDS = 7 * 24 * 60 * 60
