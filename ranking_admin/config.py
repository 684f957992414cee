"""
Configuration settings for the Ranking MK2 admin console
"""
import os
from datetime import timedelta


class Config:
    """Flask application configuration"""
    
    # Flask secret key for signing the session cookie
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'
    APP_ENV = os.environ.get('APP_ENV') or 'development'
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'
    
    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'ranking.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    
    # Admin session cookie
    SESSION_COOKIE_NAME = 'admin-session'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Strict'
    SESSION_COOKIE_SECURE = APP_ENV == 'production'
    PERMANENT_SESSION_LIFETIME = timedelta(hours=24)
    
    # Ranking list settings
    ITEMS_PER_PAGE = int(os.environ.get('ITEMS_PER_PAGE') or 10)
    MIN_PASSWORD_LENGTH = 8
    CSV_FILENAME = 'ranking-mk2-data.csv'
    PLACEHOLDER_IMAGE = 'placeholder.svg'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SESSION_COOKIE_SECURE = False
    LOG_LEVEL = 'DEBUG'
