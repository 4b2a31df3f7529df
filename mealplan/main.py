"""Command-line entry point: `mealplan <command>`.

Loads the configuration and the stored plan, runs one command, saves the plan
back (refreshing meal_plan.md) when the command changed it.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional

from mealplan.domain.Config import Config
from mealplan.domain.MealType import MealType
from mealplan.domain.errors import ConfigurationError, MealPlanError, StorageReadError, StorageWriteError, UserCancelled
from mealplan.infra.Plan_Repository import PlanRepository
from mealplan.infra.paths import config_file
from mealplan.logic.planning.day_resolver import parse_day
from mealplan.logic.planning.workflows import add_meal, edit_meal, remove_meal
from mealplan.logic.reporting.summary import format_summary, summarize_plan
from mealplan.utilities import config as settings
from mealplan.utilities.export_import import PlanExporter, sync_plan

logger = logging.getLogger(__name__)

EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2


def ask_yes_no(message: str) -> bool:
    answer = input(f"{message} (y/n) ")
    return answer.strip().lower() == "y"


def ask_field(field: str, current: str) -> Optional[str]:
    answer = input(f"Enter new {field} (leave empty to keep current value): ")
    return answer.strip() or None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mealplan", description="Organize and manage your weekly meal plan.")
    parser.add_argument("-p", "--path", type=Path, help="Custom directory for meal plan data files")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    sub = parser.add_subparsers(dest="command")

    add = sub.add_parser("add", help="Add a new meal to the plan")
    add.add_argument("description", help="Description of the meal")
    add.add_argument("-t", "--meal-type", required=True)
    add.add_argument("-d", "--day", required=True, help="YYYY-MM-DD or weekday name")
    add.add_argument("-c", "--cook", required=True)

    edit = sub.add_parser("edit", help="Edit an existing meal in the plan")
    edit.add_argument("description", nargs="?", default=None, help="New description (optional)")
    edit.add_argument("-t", "--meal-type", required=True)
    edit.add_argument("-d", "--day", required=True)
    edit.add_argument("-c", "--cook", default=None)

    remove = sub.add_parser("remove", help="Remove a meal from the plan")
    remove.add_argument("-t", "--meal-type", required=True)
    remove.add_argument("-d", "--day", required=True)

    sub.add_parser("show", help="Show a summary of the current meal plan")

    for name, fmt in (("export-ical", "iCal"), ("export-json", "JSON"),
                      ("export-markdown", "Markdown"), ("export-pdf", "PDF")):
        exp = sub.add_parser(name, help=f"Export the meal plan to {fmt} format")
        exp.add_argument("-o", "--output", type=Path, required=True)

    sync = sub.add_parser("sync", help="Regenerate the Markdown copy of the meal plan from JSON")
    sync.add_argument("-s", "--source", default="auto", choices=["json", "markdown", "md", "auto"])

    cfg = sub.add_parser("config", help="Initialize or update the configuration")
    cfg_sub = cfg.add_subparsers(dest="action", required=True)
    cfg_sub.add_parser("init", help="Initialize the configuration")

    serve = sub.add_parser("serve", help="Run the local HTTP API")
    serve.add_argument("--host", default=settings.API_HOST)
    serve.add_argument("--port", type=int, default=settings.API_PORT)
    return parser


def load_config(config_dir: Path) -> Config:
    path = config_file(config_dir)
    if path.exists():
        try:
            return Config.load(path)
        except StorageReadError as e:
            print(f"Warning: Failed to load configuration: {e}", file=sys.stderr)
            print("Using default configuration instead.", file=sys.stderr)
    else:
        print(f"Warning: No configuration file found at {path}", file=sys.stderr)
        print("Using default configuration. Run 'mealplan config init' to create a configuration file.",
              file=sys.stderr)
    return Config.default(config_dir)


def config_init(config_dir: Path, confirm: Callable[[str], bool]) -> Config:
    path = config_file(config_dir)
    if path.exists() and not confirm(f"Configuration file already exists at {path}. Overwrite?"):
        raise UserCancelled("Configuration initialization cancelled by user.")
    new_config = Config.default(config_dir)
    new_config.save(path)
    print(f"Configuration saved to {path}")
    print(f"Meal plan storage path: {new_config.storage_path}")
    print(f"Current week start date: {new_config.current_week_start_date}")
    return new_config


def _save(repo: PlanRepository, plan) -> None:
    repo.save(plan)
    try:
        repo.save_markdown(plan)
    except StorageWriteError as e:
        print(f"Warning: Failed to update markdown file: {e}", file=sys.stderr)


def _print_current(meal) -> None:
    print("Current meal details:")
    print(f"  Type: {meal.meal_type}")
    print(f"  Day: {meal.day}")
    print(f"  Cook: {meal.cook}")
    print(f"  Description: {meal.description}")
    print()


def _execute(args, config_dir: Path, confirm, prompt) -> None:
    if args.command == "config":
        config_init(config_dir, confirm)
        print("Configuration initialized successfully.")
        return

    config = load_config(config_dir)
    storage_path = args.path or config.storage_path
    try:
        storage_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigurationError(f"Failed to create storage directory: {e}") from e

    if args.command == "sync":
        sync_plan(storage_path, args.source)
        print("Meal plan synchronized successfully.")
        return

    repo = PlanRepository(storage_path)
    if not repo.exists():
        print("No existing meal plan found. Creating a new one.")
    plan = repo.load_or_create(config.current_week_start_date)

    if args.command == "add":
        add_meal(plan, args.meal_type, args.day, args.cook, args.description, confirm=confirm)
        _save(repo, plan)
        print("Meal added successfully.")
    elif args.command == "edit":
        if args.cook is None or args.description is None:
            current = plan.find(MealType.parse(args.meal_type), parse_day(args.day))
            if current is not None:
                _print_current(current)
        edit_meal(plan, args.meal_type, args.day, cook=args.cook, description=args.description, prompt=prompt)
        _save(repo, plan)
        print("Meal updated successfully.")
    elif args.command == "remove":
        remove_meal(plan, args.meal_type, args.day, confirm=confirm)
        _save(repo, plan)
        print("Meal removed successfully.")
    elif args.command and args.command.startswith("export-"):
        exporter = PlanExporter(plan)
        fmt = args.command.split("-", 1)[1]
        written = getattr(exporter, f"export_{fmt}")(args.output)
        print(f"Meal plan exported to {fmt} successfully: {written}")
    elif args.command == "serve":
        _serve(storage_path, config, args.host, args.port)
    else:
        print("Welcome to the Meal Plan CLI Tool!")
        print("This tool helps you organize and manage your weekly meal plans.")
        print("Use --help to see available commands.")
        if not plan.is_empty:
            print()
            print(format_summary(summarize_plan(plan)))
    print(f"Storage path: {storage_path}")


def _serve(storage_path: Path, config: Config, host: str, port: int) -> None:
    import uvicorn
    from mealplan.api.api_run import create_app
    from mealplan.utilities.network import server_urls

    for url in server_urls(host, port):
        print(f"Meal Plan API available at {url} (Press CTRL+C to quit)")
    uvicorn.run(create_app(storage_path, config.current_week_start_date), host=host, port=port)


def run(argv=None, confirm: Callable[[str], bool] = ask_yes_no,
        prompt: Callable[[str, str], Optional[str]] = ask_field, config_dir: Optional[Path] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else getattr(logging, settings.LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        if config_dir is None:
            config_dir = settings.default_config_dir()
        _execute(args, Path(config_dir), confirm, prompt)
    except ConfigurationError as e:
        print(f"Fatal: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except MealPlanError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    return 0


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
