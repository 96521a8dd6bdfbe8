import os

SECRET_KEY = "test-secret"

API_CONFIG = {
    "base_url": os.getenv("PAYROLL_API_URL", "http://localhost:8080"),
    "timeout": 2.0,
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
