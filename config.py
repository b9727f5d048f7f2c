import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./test.db")
    REDIS_URL = data.get("REDIS_URL", "redis://localhost:6379/0")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    GATEWAY_URL = data.get("GATEWAY_URL", "http://localhost:8080")
    RESET_PAGE_PATH = data.get("RESET_PAGE_PATH", "/oauth/password/reset_page")
    RESET_URL_EXPIRE_MINUTES = int(data.get("RESET_URL_EXPIRE_MINUTES", 10))
    RESET_COOLDOWN_SECONDS = int(data.get("RESET_COOLDOWN_SECONDS", 60))
    NOTIFY_SERVICE_URL = data.get("NOTIFY_SERVICE_URL", "http://localhost:8081/v1/notices")
    NOTIFY_TIMEOUT_SECONDS = float(data.get("NOTIFY_TIMEOUT_SECONDS", 5))
