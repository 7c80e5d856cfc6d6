"""JSON file repository for the ledger."""

import json
from dataclasses import dataclass
from pathlib import Path

from calorie_tracker.domain.ledger import Ledger
from calorie_tracker.domain.nutrition import FoodRecord
from calorie_tracker.services.ledger import LedgerRepository


class LedgerFileError(RuntimeError):
    """Raised when the ledger file cannot be read, decoded or written."""


@dataclass
class JsonLedgerRepository(LedgerRepository):
    """Ledger stored as a single tab-indented JSON file."""

    path: Path

    def exists(self) -> bool:
        """Return whether the ledger file is present."""
        return self.path.is_file()

    def load(self) -> Ledger:
        """Read the ledger; a missing file is an empty ledger."""
        if not self.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise LedgerFileError(f"Could not read {self.path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise LedgerFileError(f"Unexpected ledger layout in {self.path}")
        try:
            return {
                day: {
                    ndbno: FoodRecord.from_dict(record)
                    for ndbno, record in foods.items()
                }
                for day, foods in raw.items()
            }
        except (AttributeError, TypeError, ValueError) as exc:
            raise LedgerFileError(f"Invalid record in {self.path}: {exc}") from exc

    def save(self, ledger: Ledger) -> None:
        """Rewrite the whole ledger file."""
        payload = {
            day: {ndbno: record.to_dict() for ndbno, record in foods.items()}
            for day, foods in ledger.items()
        }
        try:
            text = json.dumps(payload, indent="\t", sort_keys=True, allow_nan=False)
        except ValueError as exc:
            raise LedgerFileError(f"Could not encode ledger: {exc}") from exc
        try:
            self.path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise LedgerFileError(f"Could not write {self.path}: {exc}") from exc
