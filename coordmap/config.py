import os
from dotenv import load_dotenv

# 加载环境变量
load_dotenv()

class Config:
    """Base configuration class."""
    SECRET_KEY = os.environ.get('SECRET_KEY', 'a_default_highly_secret_and_static_key_for_dev')

    # 地图与坐标显示
    DEFAULT_MAP_PROVIDER = os.environ.get('DEFAULT_MAP_PROVIDER', 'gaode')
    DEFAULT_COORD_FORMAT = os.environ.get('DEFAULT_COORD_FORMAT', 'decimal')

    # Upper bound on the number of points accepted by one batch request
    MAX_BATCH_POINTS = int(os.environ.get('MAX_BATCH_POINTS', 10000))

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    # To be configured in subclasses
    DEBUG = False
    TESTING = False

class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG').upper()

class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    MAX_BATCH_POINTS = 100

class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False

config_by_name = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
