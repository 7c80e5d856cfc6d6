"""Tests for the JSON ledger file."""

import json
from pathlib import Path

import pytest

from calorie_tracker.adapters.json_ledger_repository import (
    JsonLedgerRepository,
    LedgerFileError,
)
from calorie_tracker.domain.ledger import Ledger
from calorie_tracker.domain.nutrition import FoodRecord


def _ledger() -> Ledger:
    return {
        "2024-01-01": {
            "01009": FoodRecord(
                name="Cheese, cheddar",
                energy=404,
                protein=22.87,
                fat=33.31,
                carbohydrate=3.09,
                fiber=0,
                qtd=80,
            ),
            "09003": FoodRecord(name="Apples, raw", energy=52, fiber=2.4, qtd=150),
        },
        "2024-01-02": {"09003": FoodRecord(name="Apples, raw", energy=52, qtd=100)},
    }


def test_missing_file_loads_empty_ledger(tmp_path: Path) -> None:
    repository = JsonLedgerRepository(tmp_path / "calorietracker.json")

    assert not repository.exists()
    assert repository.load() == {}


def test_save_then_load_round_trips(tmp_path: Path) -> None:
    repository = JsonLedgerRepository(tmp_path / "calorietracker.json")
    ledger = _ledger()

    repository.save(ledger)

    assert repository.exists()
    assert repository.load() == ledger


def test_save_writes_tab_indented_stored_keys(tmp_path: Path) -> None:
    path = tmp_path / "calorietracker.json"
    JsonLedgerRepository(path).save(_ledger())

    text = path.read_text(encoding="utf-8")
    assert '\n\t"2024-01-01": {' in text
    stored = json.loads(text)["2024-01-01"]["01009"]
    assert stored == {
        "Name": "Cheese, cheddar",
        "Energy": 404,
        "Protein": 22.87,
        "Fat": 33.31,
        "Carbohydrate": 3.09,
        "Fiber": 0,
        "Qtd": 80,
    }


def test_loads_existing_file_format(tmp_path: Path) -> None:
    path = tmp_path / "calorietracker.json"
    path.write_text(
        json.dumps(
            {
                "2018-05-20": {
                    "01009": {
                        "Name": "Cheese, cheddar",
                        "Energy": 404,
                        "Protein": 22.87,
                        "Fat": 33.31,
                        "Carbohydrate": 3.09,
                        "Fiber": 0,
                        "Qtd": 100,
                    }
                }
            },
            indent="\t",
        ),
        encoding="utf-8",
    )

    ledger = JsonLedgerRepository(path).load()

    assert ledger["2018-05-20"]["01009"].energy == 404
    assert ledger["2018-05-20"]["01009"].qtd == 100


def test_invalid_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "calorietracker.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(LedgerFileError):
        JsonLedgerRepository(path).load()


def test_invalid_record_raises(tmp_path: Path) -> None:
    path = tmp_path / "calorietracker.json"
    path.write_text(
        json.dumps({"2024-01-01": {"01009": {"Energy": "lots"}}}), encoding="utf-8"
    )

    with pytest.raises(LedgerFileError):
        JsonLedgerRepository(path).load()


def test_unexpected_layout_raises(tmp_path: Path) -> None:
    path = tmp_path / "calorietracker.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    with pytest.raises(LedgerFileError):
        JsonLedgerRepository(path).load()


def test_non_finite_value_is_not_written(tmp_path: Path) -> None:
    path = tmp_path / "calorietracker.json"
    repository = JsonLedgerRepository(path)
    repository.save(_ledger())
    before = path.read_text(encoding="utf-8")
    ledger = _ledger()
    ledger["2024-01-01"]["01009"] = FoodRecord(name="Broken", energy=float("nan"))

    with pytest.raises(LedgerFileError):
        repository.save(ledger)

    assert path.read_text(encoding="utf-8") == before


def test_record_that_is_not_an_object_raises(tmp_path: Path) -> None:
    path = tmp_path / "calorietracker.json"
    path.write_text(json.dumps({"2024-01-01": {"01009": []}}), encoding="utf-8")

    with pytest.raises(LedgerFileError):
        JsonLedgerRepository(path).load()
