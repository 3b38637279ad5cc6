from config.settings import CONFIGS, Config, DevelopmentConfig, TestingConfig, ProductionConfig

__all__ = ['CONFIGS', 'Config', 'DevelopmentConfig', 'TestingConfig', 'ProductionConfig']
