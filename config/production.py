import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

COMPENSATION = {
    "base_pay": os.getenv("BASE_PAY", "100"),
    "regular_hours_cap": os.getenv("REGULAR_HOURS_CAP", "40"),
    "currency": os.getenv("CURRENCY", "USD"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
