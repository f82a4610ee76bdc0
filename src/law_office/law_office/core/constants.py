"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_CASE_STATUS = "open"
MAX_COMMISSION_PERCENT = 100

# Weekly payroll: bonus of 10% of base salary above this many cases.
PERFORMANCE_BONUS_THRESHOLD = 3
PERFORMANCE_BONUS_RATE = 0.10

COMPLETED_CASE_STATUSES = frozenset({"closed", "completed"})
ONGOING_CASE_STATUSES = frozenset({"open", "in_progress"})

# Amounts and ids are stored in signed MySQL INT columns.
MAX_INT_VALUE = 2**31 - 1

DEFAULT_APPOINTMENT_STATUS = "planned"
DEFAULT_APPOINTMENT_MINUTES = 60
