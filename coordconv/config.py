import os
from dotenv import load_dotenv

# 加载环境变量
load_dotenv()

class Config:
    """Base configuration class."""
    SECRET_KEY = os.environ.get('SECRET_KEY', 'a_default_highly_secret_and_static_key_for_dev')

    # Keep the key order of Coordinate.to_dict() in JSON responses
    JSON_SORT_KEYS = False

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    # 命令行输出经纬度时保留的小数位数
    COORD_DECIMALS = int(os.environ.get('COORD_DECIMALS', 6))

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

class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False

config_by_name = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
