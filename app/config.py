import os


def _int_env(name, default):
    value = os.getenv(name)
    return int(value) if value not in (None, "") else default


class BaseConfig:
    JSON_SORT_KEYS = False
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    CORS_ALLOWED_ORIGINS = os.getenv("CORS_ALLOWED_ORIGINS", "*")
    RATELIMIT_STORAGE_URL = os.getenv("RATELIMIT_STORAGE_URL", "memory://")
    RATELIMIT_DEFAULT = os.getenv("RATELIMIT_DEFAULT", "200 per hour")
    LOGIN_LIMIT_PER_IP = os.getenv("LOGIN_LIMIT_PER_IP", "10 per 30 minutes")
    SIGNUP_LIMIT_PER_IP = os.getenv("SIGNUP_LIMIT_PER_IP", "5 per hour")

    # Server-side sessions
    SESSION_ID_COOKIE = os.getenv("SESSION_ID_COOKIE", "shopfront_sid")
    SESSION_LIFETIME_DAYS = _int_env("SESSION_LIFETIME_DAYS", 30)
    SESSION_COOKIE_SECURE = os.getenv("SESSION_COOKIE_SECURE", "0").lower() in ("1", "true", "yes")

    # Item images
    UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", os.path.join(os.getcwd(), "uploads"))
    ALLOWED_IMAGE_EXTENSIONS = {"png", "jpg", "jpeg", "gif", "webp"}
    MAX_CONTENT_LENGTH = _int_env("MAX_UPLOAD_SIZE_MB", 8) * 1024 * 1024

    # Dashboard
    DASHBOARD_METRICS_SOURCE = os.getenv("DASHBOARD_METRICS_SOURCE", "random")
    DASHBOARD_RANDOM_SEED = os.getenv("DASHBOARD_RANDOM_SEED")

    # Startup database ping
    DB_CONNECT_RETRY_DELAY = float(os.getenv("DB_CONNECT_RETRY_DELAY", 5))
    DB_CONNECT_MAX_ATTEMPTS = _int_env("DB_CONNECT_MAX_ATTEMPTS", 0)

    OTEL_SERVICE_NAME = os.getenv("OTEL_SERVICE_NAME", "shopfront")
    OTEL_EXPORTER_OTLP_ENDPOINT = os.getenv(
        "OTEL_EXPORTER_OTLP_ENDPOINT", "http://localhost:4318/v1/traces"
    )


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-insecure-key")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///dev.db")


class TestingConfig(BaseConfig):
    TESTING = True
    SECRET_KEY = "test-key"
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")
    RATELIMIT_DEFAULT = "10000 per hour"
    LOGIN_LIMIT_PER_IP = "10000 per hour"
    SIGNUP_LIMIT_PER_IP = "10000 per hour"
    DB_CONNECT_RETRY_DELAY = 0
    DASHBOARD_METRICS_SOURCE = "random"


class ProductionConfig(BaseConfig):
    DEBUG = False
    TESTING = False
    SECRET_KEY = os.getenv("SECRET_KEY")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL")
    SESSION_COOKIE_SECURE = os.getenv("SESSION_COOKIE_SECURE", "1").lower() in ("1", "true", "yes")

    @staticmethod
    def validate():
        missing = []
        if not os.getenv("SECRET_KEY"):
            missing.append("SECRET_KEY")
        if not os.getenv("DATABASE_URL"):
            missing.append("DATABASE_URL")
        if missing:
            raise RuntimeError(
                f"Missing required env vars in production: {', '.join(missing)}"
            )


def get_config_class():
    env = os.getenv("APP_ENV", "development").lower()
    if env == "production":
        ProductionConfig.validate()
        return ProductionConfig
    if env == "testing":
        return TestingConfig
    return DevelopmentConfig
