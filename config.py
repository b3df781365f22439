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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./invoicing.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ENVIRONMENT = data.get("ENVIRONMENT", "dev")
    CREATE_TABLES_ON_STARTUP = bool(data.get("CREATE_TABLES_ON_STARTUP", True))

    # Authentication
    JWT_SECRET = data.get("JWT_SECRET", "change-me-in-env-yaml")
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    TOKEN_EXPIRE_DAYS = data.get("TOKEN_EXPIRE_DAYS", 7)
    TOKEN_COOKIE_NAME = data.get("TOKEN_COOKIE_NAME", "token")

    # Invoicing
    DEFAULT_TAX_RATE = data.get("DEFAULT_TAX_RATE", 10)
    COMPANY_NAME = data.get("COMPANY_NAME", "Invoicing Core")
    COMPANY_ADDRESS = data.get("COMPANY_ADDRESS", "")

    # Overdue invoice marking
    OVERDUE_CHECK_ENABLED = bool(data.get("OVERDUE_CHECK_ENABLED", True))
    OVERDUE_CHECK_INTERVAL_SECONDS = data.get("OVERDUE_CHECK_INTERVAL_SECONDS", 3600)
