"""Configuration management for the Goal Tracker application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# PDF export
EXPORT_SCALE: Final[float] = float(os.getenv('EXPORT_SCALE', '1.5'))
JPEG_QUALITY: Final[int] = int(os.getenv('JPEG_QUALITY', '75'))
DEFAULT_GOAL_FILENAME: Final[str] = os.getenv('DEFAULT_GOAL_FILENAME', 'goal')
MAX_GOAL_DAYS: Final[int] = int(os.getenv('MAX_GOAL_DAYS', '3660'))
FONT_PATH: Final[str] = os.getenv('FONT_PATH', '')

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
STATIC_DIR: Final[Path] = BASE_DIR / 'static'
TEMPLATES_DIR: Final[Path] = BASE_DIR / 'templates'
