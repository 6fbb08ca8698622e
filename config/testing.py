import os

SECRET_KEY = "test-secret"

API_CONFIG = {
    "base_url": os.getenv("API_URL", "http://api.test"),
    "admin_id": "admin",
    "admin_password": "admin123",
    "login_timeout": 8,
    "session_store_path": os.getenv("SESSION_STORE_PATH", ".session/test-store.json"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
