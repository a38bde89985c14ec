"""
Configuration for the Soulmate matrimony API.
Production (Railway/Render): uses DATABASE_URL only; fails if missing.
Local: DATABASE_URL, DB_* (PostgreSQL) or a SQLite file under instance/.
"""
import os
from pathlib import Path
from datetime import timedelta
from urllib.parse import quote_plus


BASE_DIR = Path(__file__).parent
INSTANCE_DIR = BASE_DIR / "instance"


def _is_production():
    """True when running on Railway, Render, or explicit production."""
    return (
        os.environ.get("RENDER") == "true"
        or os.environ.get("RAILWAY_ENVIRONMENT") is not None
        or os.environ.get("FLASK_ENV") == "production"
    )


def _env_flag(name, default="false"):
    return os.environ.get(name, default).lower() in ("true", "on", "1")


def _normalize_database_url(url):
    """Convert postgres:// to postgresql+psycopg2:// for SQLAlchemy/psycopg2."""
    if not url:
        return url
    url = url.strip()
    if url.startswith("postgres://"):
        return "postgresql+psycopg2://" + url[11:]
    if url.startswith("postgresql://") and "psycopg2" not in url:
        return "postgresql+psycopg2://" + url[13:]
    return url


def _get_database_uri():
    """Database URI: production = DATABASE_URL only; local = DATABASE_URL, DB_* or SQLite."""
    if _is_production():
        url = os.environ.get("DATABASE_URL")
        if not url or not url.strip():
            raise RuntimeError(
                "DATABASE_URL is required in production (Railway/Render). "
                "Set it in your service environment variables."
            )
        return _normalize_database_url(url.strip())

    url = os.environ.get("DATABASE_URL")
    if url and url.strip():
        return _normalize_database_url(url.strip())

    if os.environ.get("DB_HOST"):
        host = os.environ.get("DB_HOST")
        port = os.environ.get("DB_PORT", "5432")
        name = os.environ.get("DB_NAME", "soulmate")
        user = os.environ.get("DB_USER", "soulmate")
        password = os.environ.get("DB_PASSWORD", "")
        if password:
            password = quote_plus(password)
        return f"postgresql+psycopg2://{user}:{password}@{host}:{port}/{name}"

    try:
        INSTANCE_DIR.mkdir(exist_ok=True)
    except OSError:
        pass
    return f"sqlite:///{INSTANCE_DIR / 'soulmate.db'}"


class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key-change-in-production"

    # Bearer tokens: HS256, carries only the email claim
    ACCESS_TOKEN_SECRET = os.environ.get("ACCESS_TOKEN_SECRET") or "secret"
    ACCESS_TOKEN_ALGORITHM = "HS256"
    ACCESS_TOKEN_EXPIRES = timedelta(hours=1)

    SQLALCHEMY_DATABASE_URI = _get_database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    MAIL_SERVER = os.environ.get("MAIL_SERVER")
    MAIL_PORT = int(os.environ.get("MAIL_PORT") or 587)
    MAIL_USE_TLS = _env_flag("MAIL_USE_TLS", "true")
    MAIL_USERNAME = os.environ.get("MAIL_USERNAME")
    MAIL_PASSWORD = os.environ.get("MAIL_PASSWORD")
    MAIL_DEFAULT_SENDER = os.environ.get("MAIL_DEFAULT_SENDER") or os.environ.get("MAIL_USERNAME") or "noreply@soulmate.app"

    STRIPE_SECRET_KEY = os.environ.get("STRIPE_SECRET_KEY", "")
    STRIPE_CURRENCY = os.environ.get("STRIPE_CURRENCY", "usd")
    # When off, save-info stores the transaction id without asking Stripe about it
    VERIFY_PAYMENTS = _env_flag("VERIFY_PAYMENTS")

    # Fixed price (USD) of one contact request; revenue = approved requests * price
    CONTACT_REQUEST_PRICE = 5

    REDACT_CONTACT_DETAILS = _env_flag("REDACT_CONTACT_DETAILS")

    SEED_ADMIN_EMAIL = os.environ.get("SEED_ADMIN_EMAIL")
