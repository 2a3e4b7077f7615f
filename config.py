import os


def get_database_uri():
    """
    Resolve the SQL database URI for the ledger store
    Falls back to a local SQLite file when DATABASE_URL is not set
    """
    return os.environ.get('DATABASE_URL', 'sqlite:///inventory.db')


class Config:
    """Base configuration"""

    # Flask
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Database - key-value table backing the ledger store
    SQLALCHEMY_DATABASE_URI = None  # Will be set at runtime
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
    }

    # Ledger store backend: 'sql' or 'memory'
    LEDGER_BACKEND = os.environ.get('LEDGER_BACKEND', 'sql')

    # JWT issued by the external identity provider
    JWT_SECRET = os.environ.get('JWT_SECRET', 'dev-jwt-secret-change-in-production')
    JWT_ALGORITHM = os.environ.get('JWT_ALGORITHM', 'HS256')
    JWT_ISSUER = os.environ.get('JWT_ISSUER', 'identity-provider')
    JWT_AUDIENCE = os.environ.get('JWT_AUDIENCE', 'inventory-app')

    # CORS
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*').split(',')

    # Movement statistics
    RECENT_WINDOW_DAYS = int(os.environ.get('RECENT_WINDOW_DAYS', 7))
    RECENT_ACTIVITY_LIMIT = int(os.environ.get('RECENT_ACTIVITY_LIMIT', 10))

    # Reports
    STORE_NAME = os.environ.get('STORE_NAME', 'Mi Tienda de Barrio')

    # Seed categories and sample products on startup
    SEED_SAMPLE_DATA = os.environ.get('SEED_SAMPLE_DATA', 'False') == 'True'

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    LOG_LEVEL = 'DEBUG'
    SEED_SAMPLE_DATA = True


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    LEDGER_BACKEND = 'memory'
    JWT_SECRET = 'test-jwt-secret-with-enough-length-for-hs256'
    SEED_SAMPLE_DATA = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False


config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
