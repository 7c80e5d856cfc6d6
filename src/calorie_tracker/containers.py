"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from calorie_tracker.adapters.json_ledger_repository import JsonLedgerRepository
from calorie_tracker.adapters.ndb_client import HttpxNdbClient, NdbClient
from calorie_tracker.config import Settings
from calorie_tracker.services.ledger import LedgerService
from calorie_tracker.services.nutrition import NutritionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    ndb_client: NdbClient
    nutrition_service: NutritionService
    ledger_service: LedgerService
    close_resources: Callable[[], None]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    ndb_client = HttpxNdbClient.create(
        api_key=resolved_settings.usda_api_key,
        base_url=resolved_settings.ndb_base_url,
        timeout=resolved_settings.http_timeout_seconds,
    )
    nutrition_service = NutritionService(
        ndb_client=ndb_client,
        strict_nutrients=resolved_settings.strict_nutrients,
    )
    ledger_service = LedgerService(
        repository=JsonLedgerRepository(Path(resolved_settings.ledger_path)),
        nutrition_service=nutrition_service,
    )

    def close_resources() -> None:
        ndb_client.close()

    return AppContainer(
        settings=resolved_settings,
        ndb_client=ndb_client,
        nutrition_service=nutrition_service,
        ledger_service=ledger_service,
        close_resources=close_resources,
    )
