import os
from datetime import timedelta


def _env_bool(name, default=False):
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in {"1", "true", "yes", "y", "on"}


class Config:
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    JSON_SORT_KEYS = False
    ENV = os.getenv("FLASK_ENV", "development")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", "dev-secret-change-me")
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=1)

    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    # Debug only: echo the reset token back to the caller of forgot-password
    EXPOSE_RESET_TOKEN = _env_bool("EXPOSE_RESET_TOKEN", False)
    RESET_TOKEN_TTL_MINUTES = int(os.getenv("RESET_TOKEN_TTL_MINUTES", "60"))
    RESET_LINK_BASE = os.getenv("RESET_LINK_BASE", "http://localhost:3000/reset-password")

    # Checkout summary rules
    FREE_SHIPPING_THRESHOLD = float(os.getenv("FREE_SHIPPING_THRESHOLD", "2000"))
    FLAT_SHIPPING_FEE = float(os.getenv("FLAT_SHIPPING_FEE", "150"))
    TAX_RATE = float(os.getenv("TAX_RATE", "0.18"))
    DEFAULT_DELIVERY_DAYS = int(os.getenv("DEFAULT_DELIVERY_DAYS", "5"))

    @staticmethod
    def init_app(app):
        if not os.getenv("DATABASE_URL"):
            os.makedirs(app.instance_path, exist_ok=True)
            app.config["SQLALCHEMY_DATABASE_URI"] = f"sqlite:///{os.path.join(app.instance_path, 'app.db')}"
        else:
            app.config["SQLALCHEMY_DATABASE_URI"] = os.getenv("DATABASE_URL")


class TestConfig(Config):
    TESTING = True
    LOG_LEVEL = "WARNING"
    JWT_SECRET_KEY = "test-secret-key-with-enough-length-for-hs256"
    EXPOSE_RESET_TOKEN = False

    @staticmethod
    def init_app(app):
        app.config["SQLALCHEMY_DATABASE_URI"] = "sqlite:///:memory:"
