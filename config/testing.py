SECRET_KEY = "test-secret"

COMPENSATION = {
    "base_pay": "100",
    "regular_hours_cap": "40",
    "currency": "USD",
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
