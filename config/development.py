import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# External payroll backend
API_CONFIG = {
    "base_url": os.getenv("PAYROLL_API_URL", "http://localhost:8080"),
    "timeout": float(os.getenv("PAYROLL_API_TIMEOUT", "10")),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
