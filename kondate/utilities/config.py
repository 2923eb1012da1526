"""Configuration management for the kondate menu engine."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# Remote menu generator (Dify chat app)
DIFY_API_ENDPOINT: Final[str] = os.getenv('DIFY_API_ENDPOINT', '')
DIFY_API_KEY: Final[str] = os.getenv('DIFY_API_KEY', '')
REMOTE_TIMEOUT_SECONDS: Final[float] = float(os.getenv('REMOTE_TIMEOUT_SECONDS', '60'))
REMOTE_TEST_TIMEOUT_SECONDS: Final[float] = float(os.getenv('REMOTE_TEST_TIMEOUT_SECONDS', '5'))
REMOTE_USER: Final[str] = os.getenv('REMOTE_USER', 'recipe-system')

# Local planner tuning
SIDE_DISH_PROBABILITY: Final[float] = float(os.getenv('SIDE_DISH_PROBABILITY', '0.8'))
SOUP_PROBABILITY: Final[float] = float(os.getenv('SOUP_PROBABILITY', '0.6'))
DAILY_TIME_LIMIT_MIN: Final[int] = int(os.getenv('DAILY_TIME_LIMIT_MIN', '60'))
BUSY_DAY_TIME_LIMIT_MIN: Final[int] = int(os.getenv('BUSY_DAY_TIME_LIMIT_MIN', '30'))
BUDGET_PER_DAY_JPY: Final[int] = int(os.getenv('BUDGET_PER_DAY_JPY', '1500'))
STRICT_CONSTRAINTS: Final[bool] = os.getenv('STRICT_CONSTRAINTS', 'False').lower() == 'true'

# Inventory
PURCHASE_SHELF_LIFE_DAYS: Final[int] = int(os.getenv('PURCHASE_SHELF_LIFE_DAYS', '7'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = BASE_DIR / 'data'
