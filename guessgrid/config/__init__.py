"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and the default candidate list
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    CANDIDATE_LIST, MAX_TRIES, load_candidate_list, validate_candidate_list_integrity,
    get_candidate_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'CANDIDATE_LIST', 'MAX_TRIES', 'load_candidate_list', 'validate_candidate_list_integrity',
    'get_candidate_statistics'
]
