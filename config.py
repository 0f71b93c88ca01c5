import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./rentals.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")

    INVITE_VALIDITY_HOURS = int(data.get("INVITE_VALIDITY_HOURS", 168))
    PRESENCE_ONLINE_THRESHOLD_SECONDS = int(data.get("PRESENCE_ONLINE_THRESHOLD_SECONDS", 120))

    # External collaborators; an empty URL disables the call
    NOTIFICATION_SERVICE_URL = data.get("NOTIFICATION_SERVICE_URL", "")
    DOCUMENT_SERVICE_URL = data.get("DOCUMENT_SERVICE_URL", "http://localhost:8100")
    PAYMENT_GATEWAY_URL = data.get("PAYMENT_GATEWAY_URL", "https://api.paystack.co")
    PAYMENT_GATEWAY_SECRET = data.get("PAYMENT_GATEWAY_SECRET", "")
    PAYMENT_CURRENCY = data.get("PAYMENT_CURRENCY", "NGN")
    CREDIT_CHECK_URL = data.get("CREDIT_CHECK_URL", "")
    CREDIT_CHECK_WEBHOOK_SECRET = data.get("CREDIT_CHECK_WEBHOOK_SECRET", "")
    EXTERNAL_TIMEOUT_SECONDS = float(data.get("EXTERNAL_TIMEOUT_SECONDS", 10.0))
