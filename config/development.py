import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

COMPENSATION = {
    "base_pay": os.getenv("BASE_PAY", "100"),
    "regular_hours_cap": os.getenv("REGULAR_HOURS_CAP", "40"),
    "currency": os.getenv("CURRENCY", "USD"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
