"""Nutrition domain models and the tracked-nutrient extractor."""

import logging
import math
from dataclasses import dataclass, field, replace

from calorie_tracker.domain.reports import FoodReport

_logger = logging.getLogger(__name__)

# NDB nutrient_id -> FoodRecord field
TRACKED_NUTRIENTS: dict[str, str] = {
    "208": "energy",
    "203": "protein",
    "204": "fat",
    "205": "carbohydrate",
    "291": "fiber",
}

# FoodRecord field -> key in the ledger file
_STORED_KEYS: dict[str, str] = {
    "name": "Name",
    "energy": "Energy",
    "protein": "Protein",
    "fat": "Fat",
    "carbohydrate": "Carbohydrate",
    "fiber": "Fiber",
    "qtd": "Qtd",
}


class FoodNotFoundError(LookupError):
    """Raised when a food report contains no food."""


class NutrientValueError(ValueError):
    """Raised when a tracked nutrient value is not a finite number."""


@dataclass(frozen=True)
class FoodRecord:
    """Macro-nutrients of a food as stored in the ledger.

    Nutrient values are kept in their source units; ``qtd`` is grams eaten.
    """

    name: str = ""
    energy: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    carbohydrate: float = 0.0
    fiber: float = 0.0
    qtd: float = 0.0

    def with_quantity(self, qtd: float) -> "FoodRecord":
        """Return a copy with ``qtd`` replaced."""
        return replace(self, qtd=qtd)

    def to_dict(self) -> dict[str, object]:
        """Serialize using the ledger file keys."""
        return {key: getattr(self, attr) for attr, key in _STORED_KEYS.items()}

    @classmethod
    def from_dict(cls, payload: dict[str, object]) -> "FoodRecord":
        """Build a record from ledger file keys; missing keys use defaults."""
        if not isinstance(payload, dict):
            raise TypeError(
                f"Expected a record object, got {type(payload).__name__}"
            )
        values: dict[str, object] = {}
        for attr, key in _STORED_KEYS.items():
            if key not in payload:
                continue
            raw = payload[key]
            values[attr] = str(raw) if attr == "name" else float(raw)
        return cls(**values)


@dataclass(frozen=True)
class DailyTotals:
    """Nutrients eaten in a day, scaled from per-100 g values by ``qtd``."""

    grams: float = 0.0
    energy: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    carbohydrate: float = 0.0
    fiber: float = 0.0
    foods: int = 0


@dataclass(frozen=True)
class DaySummary:
    """Ledger entries of one day with their totals."""

    day: str
    entries: dict[str, FoodRecord] = field(default_factory=dict)
    totals: DailyTotals = field(default_factory=DailyTotals)


def extract_food_record(report: FoodReport, *, strict: bool = False) -> FoodRecord:
    """Project a food report onto the tracked macro-nutrients.

    The name comes from the first food of the report. Nutrients outside
    ``TRACKED_NUTRIENTS`` are ignored and absent ones stay at zero. A tracked
    value that is not a finite number raises ``NutrientValueError`` when ``strict``,
    otherwise it is logged and left at zero.
    """
    if not report.foods:
        raise FoodNotFoundError("Food report contains no food")
    food = report.foods[0].food
    values: dict[str, float] = {}
    for nutrient in food.nutrients:
        attr = TRACKED_NUTRIENTS.get(nutrient.nutrient_id)
        if attr is None:
            continue
        try:
            values[attr] = _parse_value(nutrient.value)
        except ValueError as exc:
            if strict:
                raise NutrientValueError(
                    f"Invalid value {nutrient.value!r} for nutrient "
                    f"{nutrient.nutrient_id} of {food.desc.ndbno}"
                ) from exc
            _logger.warning(
                "Ignoring non-numeric value %r for nutrient %s (%s) of %s",
                nutrient.value,
                nutrient.nutrient_id,
                nutrient.name,
                food.desc.ndbno,
            )
    return FoodRecord(name=food.desc.name, **values)


def daily_totals(entries: dict[str, FoodRecord]) -> DailyTotals:
    """Sum the nutrients of a day's entries, weighted by grams eaten."""
    total = DailyTotals()
    for record in entries.values():
        factor = record.qtd / 100.0
        total = DailyTotals(
            grams=total.grams + record.qtd,
            energy=total.energy + record.energy * factor,
            protein=total.protein + record.protein * factor,
            fat=total.fat + record.fat * factor,
            carbohydrate=total.carbohydrate + record.carbohydrate * factor,
            fiber=total.fiber + record.fiber * factor,
            foods=total.foods + 1,
        )
    return total


def _parse_value(value: str) -> float:
    parsed = float(value)
    if not math.isfinite(parsed):
        raise ValueError(f"non-finite value {value!r}")
    return parsed
