"""Shared test fixtures."""

import copy
import logging
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from calorie_tracker.adapters.json_ledger_repository import JsonLedgerRepository
from calorie_tracker.adapters.ndb_client import NdbClient
from calorie_tracker.config import Settings
from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.reports import FoodReport
from calorie_tracker.services.ledger import LedgerService
from calorie_tracker.services.nutrition import NutritionService


def cheddar_report_payload() -> dict[str, object]:
    return {
        "foods": [
            {
                "food": {
                    "sr": "Legacy",
                    "type": "b",
                    "desc": {
                        "ndbno": "01009",
                        "name": "Cheese, cheddar",
                        "ds": "Standard Reference",
                        "manu": "",
                        "ru": "g",
                    },
                    "nutrients": [
                        {
                            "nutrient_id": "255",
                            "name": "Water",
                            "group": "Proximates",
                            "unit": "g",
                            "value": "37.02",
                        },
                        {
                            "nutrient_id": "208",
                            "name": "Energy",
                            "group": "Proximates",
                            "unit": "kcal",
                            "value": "404",
                        },
                        {
                            "nutrient_id": "203",
                            "name": "Protein",
                            "group": "Proximates",
                            "unit": "g",
                            "value": "22.87",
                        },
                        {
                            "nutrient_id": "204",
                            "name": "Total lipid (fat)",
                            "group": "Proximates",
                            "unit": "g",
                            "value": "33.31",
                        },
                        {
                            "nutrient_id": "205",
                            "name": "Carbohydrate, by difference",
                            "group": "Proximates",
                            "unit": "g",
                            "value": "3.09",
                        },
                        {
                            "nutrient_id": "291",
                            "name": "Fiber, total dietary",
                            "group": "Proximates",
                            "unit": "g",
                            "value": "0.0",
                        },
                    ],
                }
            }
        ],
        "count": 1,
        "notfound": 0,
        "api": 2.0,
    }


def cheddar_report() -> FoodReport:
    return FoodReport.model_validate(cheddar_report_payload())


@dataclass
class FakeNdbClient(NdbClient):
    """Fake NDB client with in-memory responses that records calls."""

    list_payload: dict[str, object] = field(
        default_factory=lambda: {
            "list": {
                "lt": "f",
                "start": 0,
                "end": 2,
                "total": 2,
                "sr": "Legacy",
                "sort": "n",
                "item": [
                    {"offset": 0, "id": "01009", "name": "Cheese, cheddar"},
                    {"offset": 1, "id": "09003", "name": "Apples, raw, with skin"},
                ],
            }
        }
    )
    search_payload: dict[str, object] = field(
        default_factory=lambda: {
            "list": {
                "q": "cheddar",
                "sr": "Legacy",
                "ds": "any",
                "start": 0,
                "end": 1,
                "total": 1,
                "group": "",
                "sort": "r",
                "item": [
                    {
                        "offset": 0,
                        "group": "Dairy and Egg Products",
                        "name": "Cheese, cheddar",
                        "ndbno": "01009",
                        "ds": "SR",
                        "manu": "none",
                    }
                ],
            }
        }
    )
    report_payload: dict[str, object] = field(default_factory=cheddar_report_payload)
    calls: list[tuple[str, object]] = field(default_factory=list)

    def list_foods(self, max_results: int = 50) -> dict[str, object]:
        self.calls.append(("list", max_results))
        return copy.deepcopy(self.list_payload)

    def search_foods(self, query: str, max_results: int = 50) -> dict[str, object]:
        self.calls.append(("search", query))
        return copy.deepcopy(self.search_payload)

    def get_food_report(self, ndbno: str) -> dict[str, object]:
        self.calls.append(("report", ndbno))
        return copy.deepcopy(self.report_payload)


@pytest.fixture(autouse=True)
def reset_app_logger():
    logger = logging.getLogger("calorie_tracker")
    logger.handlers.clear()
    yield
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        usda_api_key="test-key",
        ndb_base_url="https://api.test/ndb",
        ledger_path=str(tmp_path / "calorietracker.json"),
    )


@pytest.fixture
def ndb_client() -> FakeNdbClient:
    return FakeNdbClient()


@pytest.fixture
def ledger_repository(settings: Settings) -> JsonLedgerRepository:
    return JsonLedgerRepository(Path(settings.ledger_path))


@pytest.fixture
def container(
    settings: Settings,
    ndb_client: FakeNdbClient,
    ledger_repository: JsonLedgerRepository,
) -> AppContainer:
    nutrition_service = NutritionService(ndb_client=ndb_client)
    ledger_service = LedgerService(
        repository=ledger_repository,
        nutrition_service=nutrition_service,
    )

    def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        ndb_client=ndb_client,
        nutrition_service=nutrition_service,
        ledger_service=ledger_service,
        close_resources=close_resources,
    )
