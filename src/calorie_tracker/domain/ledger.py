"""Date-keyed ledger of eaten foods."""

from calorie_tracker.domain.nutrition import FoodRecord

Ledger = dict[str, dict[str, FoodRecord]]


def add_entry(
    ledger: Ledger, day: str, ndbno: str, record: FoodRecord, quantity: float
) -> FoodRecord:
    """Merge a food into ``day`` and return the stored record.

    A new entry stores ``record`` with ``qtd`` set to ``quantity``. An
    existing entry only accumulates ``qtd``; its name and nutrients stay as
    they were first stored.
    """
    foods = ledger.setdefault(day, {})
    current = foods.get(ndbno)
    if current is None:
        stored = record.with_quantity(quantity)
    else:
        stored = current.with_quantity(current.qtd + quantity)
    foods[ndbno] = stored
    return stored


def remove_entry(ledger: Ledger, day: str, ndbno: str) -> FoodRecord | None:
    """Delete a food from ``day``; return it, or None if it was not there."""
    foods = ledger.get(day)
    if foods is None:
        return None
    removed = foods.pop(ndbno, None)
    if not foods:
        del ledger[day]
    return removed


def view_day(ledger: Ledger, day: str) -> dict[str, FoodRecord] | None:
    """Return the foods recorded for ``day``, or None if it has no record."""
    return ledger.get(day)


def has_entry(ledger: Ledger, day: str, ndbno: str) -> bool:
    """Return whether ``ndbno`` is already recorded for ``day``."""
    return ndbno in ledger.get(day, {})
