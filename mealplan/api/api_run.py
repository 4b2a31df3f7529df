from fastapi import (
    FastAPI,
    Request,
    Query,
    APIRouter,
    Response,
)
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from pathlib import Path
from datetime import date as _date
import logging

from mealplan.domain.errors import (
    MealPlanError,
    InvalidMealType,
    InvalidDayFormat,
    MealNotFound,
    MealAlreadyExists,
    UserCancelled,
    PlanNotFound,
    StorageReadError,
    StorageWriteError,
    UnsupportedOperation,
)
from mealplan.infra.Plan_Repository import PlanRepository, serialize_plan
from mealplan.infra.pdf_utils import generate_pdf_for_plan
from mealplan.logic.planning.workflows import add_meal, edit_meal, remove_meal
from mealplan.logic.reporting.ical import render_ical
from mealplan.logic.reporting.markdown import render_markdown
from mealplan.logic.reporting.summary import summarize_plan
from mealplan.utilities.validators import MealInput, MealUpdateInput

# Logging
logger = logging.getLogger("mealplan_app")

# Error -> HTTP status
STATUS_BY_ERROR = [
    (InvalidMealType, 400),
    (InvalidDayFormat, 400),
    (PlanNotFound, 404),
    (MealNotFound, 404),
    (MealAlreadyExists, 409),
    (UserCancelled, 409),
    (UnsupportedOperation, 501),
    (StorageReadError, 500),
    (StorageWriteError, 500),
]


def _status_for(error: MealPlanError) -> int:
    for error_type, status in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status
    return 500


def create_app(storage_path, week_start_date: _date = None) -> FastAPI:
    """Build the API bound to one storage directory (one plan, one user)."""
    repo = PlanRepository(storage_path)
    router = APIRouter(prefix="/api")

    def _load():
        return repo.load_or_create(week_start_date)

    def _commit(plan):
        repo.save(plan)
        try:
            repo.save_markdown(plan)
        except StorageWriteError as e:
            logger.warning("Failed to update markdown file: %s", e)

    # -------------------- Plan --------------------
    @router.get("/plan")
    def get_plan():
        return summarize_plan(_load())

    @router.post("/meals")
    def create_meal(payload: MealInput, replace: bool = Query(default=False)):
        plan = _load()
        meal = add_meal(plan, payload.meal_type, payload.day, payload.cook, payload.description,
                        confirm=(lambda _question: True) if replace else None)
        _commit(plan)
        logger.info("Meal added type=%s day=%s", meal.meal_type, meal.day)
        return {"status": "success", "meal": meal.to_dict()}

    @router.put("/meals/{meal_type}/{day}")
    def update_meal(meal_type: str, day: str, payload: MealUpdateInput):
        plan = _load()
        meal = edit_meal(plan, meal_type, day, cook=payload.cook, description=payload.description)
        _commit(plan)
        return {"status": "success", "meal": meal.to_dict()}

    @router.delete("/meals/{meal_type}/{day}")
    def delete_meal(meal_type: str, day: str, confirm: bool = Query(default=False)):
        plan = _load()
        meal = remove_meal(plan, meal_type, day, confirm=lambda _question: confirm)
        _commit(plan)
        return {"status": "success", "removed": meal.to_dict(), "remaining": len(plan)}

    # -------------------- Exports --------------------
    @router.get("/export/json")
    def export_json():
        return Response(content=serialize_plan(_load()), media_type="application/json")

    @router.get("/export/markdown", response_class=PlainTextResponse)
    def export_markdown():
        return PlainTextResponse(render_markdown(_load()), media_type="text/markdown")

    @router.get("/export/ical")
    def export_ical():
        return Response(
            content=render_ical(_load()),
            media_type="text/calendar",
            headers={"Content-Disposition": 'attachment; filename="meal_plan.ics"'},
        )

    @router.get("/export/pdf")
    def export_pdf():
        return Response(
            content=generate_pdf_for_plan(_load()),
            media_type="application/pdf",
            headers={"Content-Disposition": 'attachment; filename="meal_plan.pdf"'},
        )

    app = FastAPI(title="Meal Plan API")
    app.include_router(router)
    app.state.storage_path = Path(storage_path)

    @app.exception_handler(MealPlanError)
    async def _meal_plan_error(request: Request, exc: MealPlanError):
        status = _status_for(exc)
        if status >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=status, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": "Invalid input", "detail": jsonable_errors(exc)})

    return app


def jsonable_errors(exc: RequestValidationError):
    return [{"loc": list(err.get("loc", ())), "msg": err.get("msg", "")} for err in exc.errors()]
