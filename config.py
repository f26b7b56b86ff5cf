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
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    SESSION_TTL_DAYS = int(data.get("SESSION_TTL_DAYS", 7))
    SESSION_COOKIE_NAME = data.get("SESSION_COOKIE_NAME", "session_token")
    SESSION_COOKIE_SECURE = bool(data.get("SESSION_COOKIE_SECURE", False))
    API_KEY_HEADER = data.get("API_KEY_HEADER", "X-API-Key")
    SESSION_SWEEP_INTERVAL_SECONDS = int(
        data.get("SESSION_SWEEP_INTERVAL_SECONDS", 60 * 60)
    )
    ENABLE_SESSION_JANITOR = bool(data.get("ENABLE_SESSION_JANITOR", 1))
