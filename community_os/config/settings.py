"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in _TRUTHY


class Config:
    # Runtime
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH", "")
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Auth (tokens minted by the identity provider)
    SERVICE_AUTH_SECRET = os.getenv("SERVICE_AUTH_SECRET", "")
    SERVICE_AUTH_ISSUER = os.getenv("SERVICE_AUTH_ISSUER", "community-os-identity")
    SERVICE_AUTH_AUDIENCE = os.getenv("SERVICE_AUTH_AUDIENCE", "community-os-api")
    IDENTITY_WEBHOOK_SECRET: str = os.getenv("IDENTITY_WEBHOOK_SECRET", "")
    IDENTITY_WEBHOOK_TOLERANCE: int = int(os.getenv("IDENTITY_WEBHOOK_TOLERANCE", "300"))

    # Persistence: "prisma" (PostgreSQL) or "memory"
    PERSISTENCE_BACKEND: str = os.getenv("PERSISTENCE_BACKEND", "prisma")
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")

    # Payments
    STRIPE_SECRET_KEY: str = os.getenv("STRIPE_SECRET_KEY", "")
    STRIPE_WEBHOOK_SECRET: str = os.getenv("STRIPE_WEBHOOK_SECRET", "")
    STRIPE_API_BASE: str = os.getenv("STRIPE_API_BASE", "https://api.stripe.com/v1")
    STRIPE_TIMEOUT: float = float(os.getenv("STRIPE_TIMEOUT", "15"))
    STRIPE_WEBHOOK_TOLERANCE: int = int(os.getenv("STRIPE_WEBHOOK_TOLERANCE", "300"))
    CHECKOUT_TRIAL_DAYS: int = int(os.getenv("CHECKOUT_TRIAL_DAYS", "7"))
    MAX_TIERS_PER_COMMUNITY: int = int(os.getenv("MAX_TIERS_PER_COMMUNITY", "2"))
    CURRENCY: str = os.getenv("CURRENCY", "usd")

    # Certificates
    CERTIFICATE_DIR: str = os.getenv("CERTIFICATE_DIR", "certificates")
    PUBLIC_BASE_URL: str = os.getenv("PUBLIC_BASE_URL", "http://localhost:5001")

    # Email
    SMTP_SERVER = os.getenv("SMTP_SERVER", "smtp.gmail.com")
    SMTP_PORT = int(os.getenv("SMTP_PORT", "587"))
    SMTP_USER = os.getenv("SMTP_USER", "")
    SMTP_PASSWORD = os.getenv("SMTP_PASSWORD", "")
    SMTP_USE_TLS = _flag("SMTP_USE_TLS", "true")

    # Content
    NOTIFICATION_LIST_LIMIT: int = int(os.getenv("NOTIFICATION_LIST_LIMIT", "50"))
    DRAFT_TTL_DAYS: int = int(os.getenv("DRAFT_TTL_DAYS", "7"))
    POST_PAGE_SIZE: int = int(os.getenv("POST_PAGE_SIZE", "20"))

    # Rate limiting
    SEARCH_RATE_LIMIT = os.getenv("SEARCH_RATE_LIMIT", "30/minute")
    CHECKOUT_RATE_LIMIT = os.getenv("CHECKOUT_RATE_LIMIT", "10/minute")


class DevelopmentConfig(Config):
    """Development configuration"""

    pass


class TestingConfig(Config):
    """Testing configuration"""

    PERSISTENCE_BACKEND = "memory"


class ProductionConfig(Config):
    """Production configuration"""

    pass


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return config.get(env, config["default"])
