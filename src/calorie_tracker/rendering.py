"""Console rendering of API results and ledger days."""

import json

from calorie_tracker.domain.nutrition import DailyTotals, DaySummary, FoodRecord
from calorie_tracker.domain.reports import (
    ApiResult,
    FoodList,
    FoodReport,
    SearchResults,
)


def render_food_list(result: FoodList) -> str:
    """Render the ``/list/`` response."""
    return "".join(
        f"{item.offset}: {{\n  Ndbno: {item.id}\n  Name: {item.name}\n}}\n"
        for item in result.list.item
    )


def render_search_results(result: SearchResults) -> str:
    """Render the ``/search/`` response."""
    return "".join(
        f"{item.offset}: {{\n"
        f"  Group: {item.group}\n"
        f"  Name: {item.name}\n"
        f"  Ndbno: {item.ndbno}\n"
        f"  Database: {item.ds}\n"
        f"  Manufacturer: {item.manu}\n"
        "}\n"
        for item in result.list.item
    )


def render_food_report(result: FoodReport) -> str:
    """Render the ``/V2/reports`` response with every nutrient."""
    lines: list[str] = []
    for entry in result.foods:
        food = entry.food
        lines.append("{")
        lines.append(f"  Ndbno: {food.desc.ndbno}")
        lines.append(f"  Name: {food.desc.name}")
        lines.append("  Nutrients: [")
        for nutrient in food.nutrients:
            lines.extend(
                [
                    "    {",
                    f"       NutrientID: {nutrient.nutrient_id}",
                    f"       Name: {nutrient.name}",
                    f"       Unit: {nutrient.unit}",
                    f"       Value: {nutrient.value}",
                    "    }",
                ]
            )
        lines.append("  ]")
        lines.append("}")
    return "".join(f"{line}\n" for line in lines)


def render_result(result: ApiResult) -> str:
    """Render any API result with the function of its variant."""
    if isinstance(result, FoodList):
        return render_food_list(result)
    if isinstance(result, SearchResults):
        return render_search_results(result)
    if isinstance(result, FoodReport):
        return render_food_report(result)
    raise TypeError(f"Unsupported result type: {type(result).__name__}")


def render_entries(entries: dict[str, FoodRecord]) -> str:
    """Render a day's entries as tab-indented JSON."""
    payload = {ndbno: record.to_dict() for ndbno, record in entries.items()}
    return json.dumps(payload, indent="\t", sort_keys=True)


def render_totals(totals: DailyTotals) -> str:
    """Render a day's totals."""
    return (
        f"Totals ({totals.foods} foods, {totals.grams:g} g):\n"
        f"  Energy: {totals.energy:.1f}\n"
        f"  Protein: {totals.protein:.1f}\n"
        f"  Fat: {totals.fat:.1f}\n"
        f"  Carbohydrate: {totals.carbohydrate:.1f}\n"
        f"  Fiber: {totals.fiber:.1f}\n"
    )


def render_day(summary: DaySummary) -> str:
    """Render a day's entries followed by its totals."""
    return f"{render_entries(summary.entries)}\n{render_totals(summary.totals)}"


def render_record(day: str, ndbno: str, record: FoodRecord) -> str:
    """Render a record just stored in the ledger."""
    return f"{day}\n{render_entries({ndbno: record})}\n"
