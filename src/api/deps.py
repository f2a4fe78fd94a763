"""FastAPI dependency injection."""

from src.config import Settings, settings
from src.engine.precision import DecimalPolicy


def get_settings() -> Settings:
    return settings


def get_policy() -> DecimalPolicy:
    return DecimalPolicy(precision=settings.decimal_precision)
