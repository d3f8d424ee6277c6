"""
Configuration settings for the TAL device page strategy layer.
Values are read from the environment (and an optional .env file) once at import time.
"""

import os
from typing import Dict, Any
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

def get_env_bool(key: str, default: bool = False) -> bool:
    """Convert environment variable to boolean."""
    value = os.getenv(key, str(default)).lower()
    return value in ('true', '1', 'yes', 'on')

def get_env_int(key: str, default: int) -> int:
    """Convert environment variable to integer."""
    try:
        return int(os.getenv(key, str(default)))
    except ValueError:
        return default

# Application Information
APP_NAME = "tal-page-strategies"
APP_VERSION = "1.0.0"

# Environment Configuration
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
DEBUG = get_env_bool("DEBUG", ENVIRONMENT == "development")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "console")

# Device configuration lookup
TAL_CONFIG_PATH = os.getenv("TAL_CONFIG_PATH", os.path.join(".", "config"))
TAL_DEVICE_SUBDIR = os.getenv("TAL_DEVICE_SUBDIR", "devices")

# Page strategies
TAL_PAGE_STRATEGY_PATH = os.getenv("TAL_PAGE_STRATEGY_PATH", os.path.join(".", "pagestrategy"))
TAL_DEFAULT_PAGE_STRATEGY = os.getenv("TAL_DEFAULT_PAGE_STRATEGY", "default")

def get_config() -> Dict[str, Any]:
    """Get the full application configuration."""
    return {
        "app": {
            "name": APP_NAME,
            "version": APP_VERSION,
            "environment": ENVIRONMENT,
            "debug": DEBUG
        },
        "logging": {
            "level": LOG_LEVEL,
            "format": LOG_FORMAT
        },
        "devices": {
            "config_path": TAL_CONFIG_PATH,
            "sub_dir": TAL_DEVICE_SUBDIR
        },
        "page_strategies": {
            "path": TAL_PAGE_STRATEGY_PATH,
            "default_strategy": TAL_DEFAULT_PAGE_STRATEGY
        }
    }
