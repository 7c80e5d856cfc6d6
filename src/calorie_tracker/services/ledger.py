"""Ledger service: load, merge and persist eaten foods."""

import logging
from dataclasses import dataclass
from typing import Protocol

from calorie_tracker.domain.ledger import (
    Ledger,
    add_entry,
    has_entry,
    remove_entry,
    view_day,
)
from calorie_tracker.domain.nutrition import DaySummary, FoodRecord, daily_totals
from calorie_tracker.services.nutrition import NutritionService

_logger = logging.getLogger(__name__)


class LedgerRepository(Protocol):
    """Persistence interface for the ledger."""

    def load(self) -> Ledger:
        """Return the stored ledger, or an empty one if nothing is stored."""

    def save(self, ledger: Ledger) -> None:
        """Replace the stored ledger."""


@dataclass
class LedgerService:
    """Service that records eaten foods per day.

    Every mutation loads the whole ledger, changes one entry and rewrites it.
    There is no locking: concurrent invocations may lose updates.
    """

    repository: LedgerRepository
    nutrition_service: NutritionService

    def add_food(self, day: str, ndbno: str, quantity: float) -> FoodRecord:
        """Add ``quantity`` grams of a food to ``day``.

        Nutrients are fetched only the first time a food is added on a day.
        """
        ledger = self.repository.load()
        if has_entry(ledger, day, ndbno):
            record = ledger[day][ndbno]
            _logger.debug("Accumulating %s on %s without refetching", ndbno, day)
        else:
            record = self.nutrition_service.get_food_record(ndbno)
        stored = add_entry(ledger, day, ndbno, record, quantity)
        self.repository.save(ledger)
        _logger.info(
            "Added %sg of %s on %s (total %sg)", quantity, ndbno, day, stored.qtd
        )
        return stored

    def remove_food(self, day: str, ndbno: str) -> FoodRecord | None:
        """Remove a food from ``day``; None if it was not recorded."""
        ledger = self.repository.load()
        removed = remove_entry(ledger, day, ndbno)
        if removed is None:
            return None
        self.repository.save(ledger)
        _logger.info("Removed %s from %s", ndbno, day)
        return removed

    def show_day(self, day: str) -> DaySummary | None:
        """Return the foods and totals of ``day``; None if it has no record."""
        entries = view_day(self.repository.load(), day)
        if entries is None:
            return None
        return DaySummary(day=day, entries=entries, totals=daily_totals(entries))
