"""
Export of a meal plan to JSON, Markdown, iCalendar and PDF, and JSON -> Markdown sync.
"""
from datetime import datetime
from pathlib import Path
import logging

from mealplan.domain.Plan import MealPlan
from mealplan.domain.errors import StorageReadError, UnsupportedOperation
from mealplan.infra.Plan_Repository import PlanRepository, atomic_write, serialize_plan
from mealplan.infra.pdf_utils import generate_pdf_for_plan
from mealplan.logic.reporting.ical import render_ical
from mealplan.logic.reporting.markdown import load_from_markdown, render_markdown

logger = logging.getLogger(__name__)

SYNC_SOURCES = ("json", "markdown", "md", "auto")


def _default_output(prefix: str, suffix: str) -> Path:
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return Path(f"{prefix}_{timestamp}{suffix}")


class PlanExporter:
    """Write a plan in one of the export formats."""

    def __init__(self, plan: MealPlan):
        self.plan = plan

    def export_json(self, output_path: Path = None) -> Path:
        """Structured JSON, the same bytes the repository stores."""
        output_path = Path(output_path) if output_path else _default_output("meal_plan_export", ".json")
        atomic_write(output_path, serialize_plan(self.plan))
        logger.info(f"Exported {len(self.plan)} meals to {output_path}")
        return output_path

    def export_markdown(self, output_path: Path = None) -> Path:
        output_path = Path(output_path) if output_path else _default_output("meal_plan_export", ".md")
        atomic_write(output_path, render_markdown(self.plan).encode("utf-8"))
        logger.info(f"Exported Markdown to {output_path}")
        return output_path

    def export_ical(self, output_path: Path = None, now: datetime = None) -> Path:
        output_path = Path(output_path) if output_path else _default_output("meal_plan_export", ".ics")
        atomic_write(output_path, render_ical(self.plan, now).encode("utf-8"))
        logger.info(f"Exported {len(self.plan)} calendar events to {output_path}")
        return output_path

    def export_pdf(self, output_path: Path = None) -> Path:
        output_path = Path(output_path) if output_path else _default_output("meal_plan_export", ".pdf")
        atomic_write(output_path, generate_pdf_for_plan(self.plan))
        logger.info(f"Exported PDF to {output_path}")
        return output_path


def sync_plan(storage_path, source: str = "auto") -> Path:
    """Regenerate meal_plan.md from meal_plan.json inside `storage_path`.

    Only the JSON direction exists. source="markdown" (or "md") always raises
    UnsupportedOperation; "auto" uses JSON when present.
    """
    source = (source or "auto").lower()
    if source not in SYNC_SOURCES:
        raise ValueError(f"Unknown sync source: {source!r}. Use json, markdown, or auto.")

    repo = PlanRepository(storage_path)
    json_exists = repo.plan_path.exists()
    markdown_exists = repo.markdown_path.exists()

    if source in ("markdown", "md"):
        load_from_markdown(repo.markdown_path)
    if not json_exists:
        if source == "auto" and markdown_exists:
            raise UnsupportedOperation(
                "Only a Markdown plan was found; syncing from Markdown to JSON is not supported.")
        raise StorageReadError(f"No meal plan files found to sync in {storage_path}.")

    logger.info("Syncing from JSON to Markdown...")
    plan = repo.load()
    return repo.save_markdown(plan)
