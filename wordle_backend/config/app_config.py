"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env (if present)
load_dotenv(os.getenv('WORDLE_CONFIG_FILE', 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 8080))
    API_URL = os.getenv('API_URL', 'http://localhost:3000')
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*').split(',')

    # Storage Settings
    STORE_BACKEND = os.getenv('STORE_BACKEND', 'memory')
    MONGO_URI = os.getenv('MONGO_URI')
    MONGO_DB_NAME = os.getenv('MONGO_DB_NAME', 'wordle_game')

    # Game Settings
    DEFAULT_MAX_TRIES = int(os.getenv('DEFAULT_MAX_TRIES', 6))
    DEFAULT_WORD_SIZE = int(os.getenv('DEFAULT_WORD_SIZE', 5))
    DEFAULT_MODE = os.getenv('DEFAULT_MODE', 'speed')

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    STORE_BACKEND = os.getenv('STORE_BACKEND', 'mongo')


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    STORE_BACKEND = 'memory'
    LOG_DIR = ''


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
