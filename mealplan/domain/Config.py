"""Config record: where meal plans are stored and which week is current."""
import logging
from datetime import date
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mealplan.domain.errors import StorageReadError, StorageWriteError
from mealplan.infra.Plan_Repository import atomic_write

logger = logging.getLogger(__name__)


class Config(BaseModel):
    """Schema of config.json."""
    model_config = ConfigDict(populate_by_name=True)

    storage_path: Path = Field(..., alias="meal_plan_storage_path")
    current_week_start_date: date = Field(default_factory=date.today)

    @classmethod
    def default(cls, config_dir) -> "Config":
        '''Defaults: store plans next to the config file, current week starts today.'''
        return cls(storage_path=Path(config_dir), current_week_start_date=date.today())

    @classmethod
    def load(cls, path) -> "Config":
        path = Path(path)
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageReadError(f"Failed to read configuration {path}: {e}") from e
        try:
            return cls.model_validate_json(raw)
        except ValidationError as e:
            raise StorageReadError(f"Invalid configuration in {path}: {e}") from e

    def save(self, path) -> Path:
        path = Path(path)
        payload = self.model_dump_json(by_alias=True, indent=2)
        try:
            atomic_write(path, payload.encode("utf-8"))
        except StorageWriteError:
            logger.error(f"Failed to save configuration to {path}")
            raise
        logger.info(f"Configuration saved to {path}")
        return path
