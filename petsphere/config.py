import os
from datetime import timedelta


def _env_flag(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    # Session configuration
    SECRET_KEY = os.getenv('SECRET_KEY', os.getenv('SESSION_SECRET', 'pet-sphere-secret'))
    SESSION_COOKIE_NAME = 'petsphere.sid'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SECURE = os.getenv('APP_ENV', os.getenv('FLASK_ENV', 'development')) == 'production'
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    # Expired sessions are pruned once a day
    SESSION_PRUNE_INTERVAL = int(os.getenv('SESSION_PRUNE_INTERVAL', 24 * 60 * 60))

    # Catalog
    SEED_DEMO_PRODUCTS = _env_flag('SEED_DEMO_PRODUCTS', True)

    # CORS configuration
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')
    CORS_SUPPORTS_CREDENTIALS = True
    CORS_ALLOW_HEADERS = ["Content-Type", "Authorization"]
    CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    SESSION_COOKIE_SECURE = False
    SESSION_PRUNE_INTERVAL = 0
    SEED_DEMO_PRODUCTS = False
