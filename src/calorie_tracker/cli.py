"""Command-line entrypoint."""

import argparse
import logging
import math
from collections.abc import Callable, Sequence
from datetime import date

from pydantic import ValidationError

from calorie_tracker.adapters.json_ledger_repository import LedgerFileError
from calorie_tracker.app_logging import configure_logging
from calorie_tracker.config import MissingApiKeyError, Settings, require_api_key
from calorie_tracker.containers import AppContainer, build_container
from calorie_tracker.domain.nutrition import FoodNotFoundError, NutrientValueError
from calorie_tracker.rendering import render_day, render_record, render_result
from calorie_tracker.services.nutrition import NdbApiError

ACTIONS = ("list", "search", "get_details", "add", "remove", "show")
_API_ACTIONS = {"list", "search", "get_details", "add"}
_NDBNO_ACTIONS = {"get_details", "add", "remove"}

_FATAL_ERRORS = (
    NdbApiError,
    FoodNotFoundError,
    NutrientValueError,
    LedgerFileError,
    MissingApiKeyError,
    ValidationError,
)

_logger = logging.getLogger(__name__)


def _iso_date(value: str) -> str:
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"invalid date {value!r}, expected yyyy-mm-dd"
        ) from exc


def _grams(value: str) -> float:
    try:
        grams = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid quantity {value!r}") from exc
    if not math.isfinite(grams) or grams <= 0:
        raise argparse.ArgumentTypeError(
            f"invalid quantity {value!r}, expected a positive number of grams"
        )
    return grams


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="calorie-tracker",
        description="Query the USDA nutrient database and track daily intake.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-action",
        choices=ACTIONS,
        default="list",
        help="Action (list, search, get_details, add, remove, show)",
    )
    parser.add_argument(
        "-max", type=int, default=50, help="Maximum number of items to return"
    )
    parser.add_argument("-food", default="", help="Food to search for (search)")
    parser.add_argument(
        "-day",
        type=_iso_date,
        default=None,
        help="Day to use for add, remove and show. Format: yyyy-mm-dd "
        "(default: today)",
    )
    parser.add_argument(
        "-ndbno", default="", help="Food ndbno (get_details, add, remove)"
    )
    parser.add_argument(
        "-qtd",
        type=_grams,
        default=100,
        help="Weight of food consumed in grams (add)",
    )
    parser.add_argument(
        "-verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(
    argv: Sequence[str] | None = None,
    *,
    settings: Settings | None = None,
    container_factory: Callable[[Settings], AppContainer] = build_container,
) -> int:
    """Run one action and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.action == "search" and not args.food:
        parser.error("-food is required for the search action")
    if args.action in _NDBNO_ACTIONS and not args.ndbno:
        parser.error(f"-ndbno is required for the {args.action} action")

    configure_logging(verbose=args.verbose)
    day = args.day or date.today().isoformat()

    try:
        resolved_settings = settings or Settings()
        if args.action in _API_ACTIONS:
            require_api_key(resolved_settings)
        container = container_factory(resolved_settings)
        try:
            return _run(container, args, day)
        finally:
            container.close_resources()
    except _FATAL_ERRORS as exc:
        _logger.error("%s", exc)
        return 1


def _run(container: AppContainer, args: argparse.Namespace, day: str) -> int:
    nutrition = container.nutrition_service
    ledger = container.ledger_service

    if args.action == "list":
        print(render_result(nutrition.list_foods(args.max)), end="")
    elif args.action == "search":
        print(render_result(nutrition.search(args.food, args.max)), end="")
    elif args.action == "get_details":
        print(render_result(nutrition.get_food_report(args.ndbno)), end="")
    elif args.action == "add":
        record = ledger.add_food(day, args.ndbno, args.qtd)
        print(render_record(day, args.ndbno, record), end="")
    elif args.action == "remove":
        removed = ledger.remove_food(day, args.ndbno)
        if removed is None:
            _logger.warning(
                "Nothing to remove: %s is not recorded on %s", args.ndbno, day
            )
        else:
            print("Erased food record")
    elif args.action == "show":
        summary = ledger.show_day(day)
        if summary is None:
            _logger.error("There is no record for the requested day %s", day)
            return 1
        print(render_day(summary), end="")
    return 0
