"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_API_BASE_URL = "http://localhost:8080"
DEFAULT_API_TIMEOUT = 10.0

CHECK_NUMBER_PREFIX = "CHK"
CHECK_NUMBER_LENGTH = 8

MIN_PHONE_LENGTH = 10

SESSION_USER_KEY = "user"
SESSION_ACTION_KEY = "check_action"

# Static messages shown when a backend call fails.
MSG_LIST_FAILED = "Could not load data from the payroll service. Please try again later."
MSG_STORE_CREATE_FAILED = "Failed to create store. Please try again."
MSG_EMPLOYEE_CREATE_FAILED = "Please try with different mobile number or try again later..."
MSG_CHECK_CREATE_FAILED = "Failed to create payroll check. Please try again."
MSG_CHECK_PAY_FAILED = "Failed to update payroll check. Please try again."
MSG_CHECK_REJECT_FAILED = "Failed to reject payroll check. Please try again."
