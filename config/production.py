import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_CONFIG = {
    "base_url": os.getenv("API_URL", "http://localhost:5000"),
    "admin_id": os.getenv("ADMIN_ID", "please-set-ADMIN_ID"),
    "admin_password": os.getenv("ADMIN_PASSWORD", "please-set-ADMIN_PASSWORD"),
    "login_timeout": float(os.getenv("LOGIN_TIMEOUT_SECONDS", "8")),
    "session_store_path": os.getenv("SESSION_STORE_PATH", "/var/lib/automated-attendance/session.json"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
