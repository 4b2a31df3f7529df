"""Configuration management for the Meal Plan application."""
import os
from typing import Final, Optional
from pathlib import Path

from dotenv import load_dotenv

from mealplan.domain.errors import ConfigurationError

# Load environment variables from a .env file in the working directory if it exists
load_dotenv(Path.cwd() / '.env')

# Application Settings
LOG_LEVEL: Final[str] = os.getenv('MEALPLAN_LOG_LEVEL', 'WARNING').upper()
API_HOST: Final[str] = os.getenv('MEALPLAN_API_HOST', '127.0.0.1')
API_PORT: Final[int] = int(os.getenv('MEALPLAN_API_PORT', '8000'))

# Overrides ~/.config/mealplan when set
MEALPLAN_HOME: Final[Optional[str]] = os.getenv('MEALPLAN_HOME')


def default_config_dir() -> Path:
    """Directory holding config.json (and, by default, the meal plan itself).

    Raises ConfigurationError when no home directory can be determined.
    """
    if MEALPLAN_HOME:
        return Path(MEALPLAN_HOME).expanduser()
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise ConfigurationError(f"Could not determine home directory: {e}") from e
    return home / '.config' / 'mealplan'
