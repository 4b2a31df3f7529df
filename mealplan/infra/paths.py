from pathlib import Path
from mealplan.utilities.constants import PLAN_FILENAME, MARKDOWN_FILENAME, CONFIG_FILENAME

# File layout inside a storage / config directory (single source of truth)

def plan_file(storage_path) -> Path:
    return Path(storage_path) / PLAN_FILENAME


def markdown_file(storage_path) -> Path:
    return Path(storage_path) / MARKDOWN_FILENAME


def config_file(config_dir) -> Path:
    return Path(config_dir) / CONFIG_FILENAME


__all__ = ['plan_file', 'markdown_file', 'config_file']
