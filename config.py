"""
Configuration management for acadreq application
"""
import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def database_uri(default=None):
    """
    Database URI from the environment

    DATABASE_URL wins; otherwise the MYSQL_* keys build a PyMySQL URI when
    MYSQL_HOST or MYSQL_DB is set. Falls back to ``default`` when given,
    else to a local MySQL database.
    """
    url = os.environ.get('DATABASE_URL')
    if url:
        return url
    if default and not (os.environ.get('MYSQL_HOST') or os.environ.get('MYSQL_DB')):
        return default
    return (
        f"mysql+pymysql://{os.environ.get('MYSQL_USER', 'root')}:{os.environ.get('MYSQL_PASSWORD', '')}"
        f"@{os.environ.get('MYSQL_HOST', 'localhost')}/{os.environ.get('MYSQL_DB', 'acadreq')}"
    )


class Config:
    """Base configuration class"""

    # Flask Configuration
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Database Configuration
    SQLALCHEMY_DATABASE_URI = database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
    }

    # Token Configuration
    JWT_SECRET = os.environ.get('JWT_SECRET') or SECRET_KEY
    JWT_EXPIRES_MIN = int(os.environ.get('JWT_EXPIRES_MIN', 1440))  # 24 hours

    # CORS
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')

    # Application Settings
    DEBUG = os.environ.get('FLASK_DEBUG', 'False').lower() in ['true', 'on', '1']
    TESTING = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL')

    @staticmethod
    def init_app(app):
        """Initialize application with configuration"""
        pass


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = database_uri('sqlite:///acadreq.db')
    SQLALCHEMY_ENGINE_OPTIONS = {}


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    SECRET_KEY = os.environ.get('SECRET_KEY')
    JWT_SECRET = os.environ.get('JWT_SECRET') or os.environ.get('SECRET_KEY')

    @classmethod
    def init_app(cls, app):
        Config.init_app(app)

        # Ensure secrets are set in production
        if not app.config['SECRET_KEY']:
            raise ValueError("SECRET_KEY environment variable must be set in production")
        if not app.config['JWT_SECRET']:
            raise ValueError("JWT_SECRET environment variable must be set in production")


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    JWT_SECRET = 'testing-jwt-secret'
    LOG_LEVEL = 'WARNING'


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
