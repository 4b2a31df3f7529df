import json, os, tempfile, shutil
import logging
from datetime import date
from pathlib import Path
from typing import Optional
from mealplan.domain.Plan import MealPlan
from mealplan.domain.errors import PlanNotFound, StorageReadError, StorageWriteError
from mealplan.infra.paths import plan_file, markdown_file
from mealplan.logic.reporting.markdown import render_markdown

logger = logging.getLogger(__name__)


def serialize_plan(plan: MealPlan) -> bytes:
    """Canonical JSON form of a plan (UTF-8). Round-trips through deserialize_plan."""
    return json.dumps(plan.to_dict(), indent=2, ensure_ascii=False).encode("utf-8")


def deserialize_plan(raw: bytes) -> MealPlan:
    try:
        data = json.loads(raw.decode("utf-8") if isinstance(raw, (bytes, bytearray)) else raw)
        if not isinstance(data, dict):
            raise ValueError("top-level JSON value must be an object")
        return MealPlan.from_dict(data)
    except (UnicodeDecodeError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        raise StorageReadError(f"Malformed meal plan data: {e}") from e


def atomic_write(path: Path, payload: bytes) -> None:
    """Write `payload` to a temp file next to `path`, then move it into place."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.stem}_", suffix=path.suffix)
    except OSError as e:
        raise StorageWriteError(f"Failed to write {path}: {e}") from e
    try:
        with os.fdopen(fd, "wb") as tmp:
            tmp.write(payload)
        shutil.move(tmp_path, str(path))
    except OSError as e:
        raise StorageWriteError(f"Failed to write {path}: {e}") from e
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)


class PlanRepository:
    """Loads and saves the meal plan of one storage directory."""

    def __init__(self, storage_path):
        self.storage_path = Path(storage_path)

    @property
    def plan_path(self) -> Path:
        return plan_file(self.storage_path)

    @property
    def markdown_path(self) -> Path:
        return markdown_file(self.storage_path)

    def exists(self) -> bool:
        return self.plan_path.exists()

    def load(self) -> MealPlan:
        try:
            raw = self.plan_path.read_bytes()
        except FileNotFoundError as e:
            raise PlanNotFound(f"No meal plan found at {self.plan_path}") from e
        except OSError as e:
            raise StorageReadError(f"Failed to read {self.plan_path}: {e}") from e
        plan = deserialize_plan(raw)
        logger.info(f"Loaded {len(plan)} meals from {self.plan_path}")
        return plan

    def load_or_create(self, week_start_date: Optional[date] = None) -> MealPlan:
        """Load the stored plan, or start an empty one when there is none.

        A plan file that exists but cannot be read raises StorageReadError.
        """
        try:
            return self.load()
        except PlanNotFound:
            logger.info(f"No existing meal plan in {self.storage_path}; creating a new one")
        return MealPlan(week_start_date or date.today())

    def save(self, plan: MealPlan) -> Path:
        atomic_write(self.plan_path, serialize_plan(plan))
        logger.info(f"Saved {len(plan)} meals to {self.plan_path}")
        return self.plan_path

    def save_markdown(self, plan: MealPlan) -> Path:
        atomic_write(self.markdown_path, render_markdown(plan).encode("utf-8"))
        logger.info(f"Updated {self.markdown_path}")
        return self.markdown_path
