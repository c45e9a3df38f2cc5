import os


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///tiles.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    JSON_SORT_KEYS = False

    # Comma-separated list
    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]

    APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT = int(os.getenv("APP_PORT", "3000"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Create tables and load the sample catalog when the table is empty
    AUTO_SEED = _env_flag("AUTO_SEED", "true")

    # Square meters per tile; 0.36 is a 60x60cm tile
    DEFAULT_TILE_AREA = float(os.getenv("DEFAULT_TILE_AREA", "0.36"))

    # Inquiry relay
    WHATSAPP_NUMBER = os.getenv("WHATSAPP_NUMBER", "917016753977")
    INQUIRY_WEBHOOK_URL = os.getenv("INQUIRY_WEBHOOK_URL", "").strip() or None
    NOTIFY_TIMEOUT = int(os.getenv("NOTIFY_TIMEOUT", "10"))
