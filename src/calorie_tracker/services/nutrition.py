"""Nutrition service integrating the USDA NDB API."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from calorie_tracker.adapters.ndb_client import NdbClient
from calorie_tracker.domain.nutrition import FoodRecord, extract_food_record
from calorie_tracker.domain.reports import FoodList, FoodReport, SearchResults

_logger = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)

if TYPE_CHECKING:
    from collections.abc import Callable


class NdbApiError(RuntimeError):
    """Raised when the NDB API cannot be reached or returns unusable data."""


@dataclass
class NutritionService:
    """Service for NDB lookups decoded into typed responses."""

    ndb_client: NdbClient
    strict_nutrients: bool = False

    def list_foods(self, max_results: int = 50) -> FoodList:
        """List foods sorted by name."""
        foods = self._fetch(
            lambda: self.ndb_client.list_foods(max_results),
            FoodList,
            action="list",
        )
        _logger.debug("NDB list: results=%s", len(foods.list.item))
        return foods

    def search(self, query: str, max_results: int = 50) -> SearchResults:
        """Search foods by relevance."""
        results = self._fetch(
            lambda: self.ndb_client.search_foods(query, max_results),
            SearchResults,
            action="search",
        )
        _logger.debug(
            "NDB search: query=%s results=%s", query, len(results.list.item)
        )
        return results

    def get_food_report(self, ndbno: str) -> FoodReport:
        """Retrieve the basic report of a food."""
        return self._fetch(
            lambda: self.ndb_client.get_food_report(ndbno),
            FoodReport,
            action=f"get_food_report:{ndbno}",
        )

    def get_food_record(self, ndbno: str) -> FoodRecord:
        """Retrieve a food and reduce it to its tracked macro-nutrients."""
        report = self.get_food_report(ndbno)
        return extract_food_record(report, strict=self.strict_nutrients)

    def _fetch(
        self,
        func: "Callable[[], dict[str, object]]",
        model: type[_ModelT],
        *,
        action: str,
    ) -> _ModelT:
        """Call the client once and validate the payload into ``model``."""
        try:
            payload = func()
        except (httpx.HTTPError, ValueError) as exc:
            status_code = _status_code_from_exception(exc)
            _logger.debug(
                "NDB %s failed (status=%s): %s", action, status_code, exc
            )
            raise NdbApiError(f"NDB {action} request failed: {exc}") from exc
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            _logger.debug("NDB %s returned an unexpected payload: %s", action, exc)
            raise NdbApiError(f"NDB {action} returned an unexpected payload") from exc


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
