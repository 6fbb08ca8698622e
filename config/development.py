import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

API_CONFIG = {
    "base_url": os.getenv("API_URL", "http://localhost:5000"),
    # Static admin pair; also sent as admin-id / admin-password headers
    "admin_id": os.getenv("ADMIN_ID", "admin"),
    "admin_password": os.getenv("ADMIN_PASSWORD", "admin123"),
    "login_timeout": float(os.getenv("LOGIN_TIMEOUT_SECONDS", "8")),
    "session_store_path": os.getenv("SESSION_STORE_PATH", ".session/store.json"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
