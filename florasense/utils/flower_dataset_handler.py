import json
import logging
from pathlib import Path
from typing import Any

from florasense.domain.exceptions import ConfigurationError
from florasense.domain.observation import LABEL_FIELDS, RECORD_FIELDS, LabeledObservation

# Labelled training records shipped with the package
_DEFAULT_DATASET = Path(__file__).resolve().parent.parent / "data" / "flower_dataset.json"

logger = logging.getLogger(__name__)


class FlowerDatasetHandler:
    """
    Loads the labelled flower dataset the classifiers are trained on.

    The file is read once; records are exposed as an immutable tuple of
    :class:`LabeledObservation`. Unlike optional reference data, the
    classifiers cannot work without it, so a missing or malformed file is a
    configuration error rather than an empty dataset.
    """

    REQUIRED_FIELDS = RECORD_FIELDS + LABEL_FIELDS

    def __init__(self, json_file: str | Path | None = None):
        self.json_path = Path(json_file) if json_file else _DEFAULT_DATASET
        self.data = self._load_json()
        self.records: tuple[LabeledObservation, ...] = self._parse_records(self.data["flower_dataset"])
        logger.info("Loaded %d labelled records from %s", len(self.records), self.json_path)

    def _load_json(self) -> dict[str, Any]:
        """Loads the JSON file."""
        if not self.json_path.exists():
            raise ConfigurationError(
                f"Training dataset not found: {self.json_path}", detail={"path": str(self.json_path)}
            )

        try:
            with self.json_path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(
                f"Failed to parse {self.json_path}: {exc}", detail={"path": str(self.json_path)}
            ) from exc

        if not isinstance(data, dict) or not isinstance(data.get("flower_dataset"), list):
            raise ConfigurationError("Invalid dataset format: expected a 'flower_dataset' list")
        return data

    def _parse_records(self, raw_records: list[Any]) -> tuple[LabeledObservation, ...]:
        records = []
        for index, record in enumerate(raw_records):
            missing = self.validate_record(record)
            if missing:
                raise ConfigurationError(
                    f"Dataset record {index} is missing fields: {', '.join(missing)}",
                    detail={"index": index, "missing": missing},
                )
            try:
                records.append(LabeledObservation.from_record(record))
            except ValueError as exc:
                raise ConfigurationError(
                    f"Dataset record {index} has an invalid label: {exc}", detail={"index": index}
                ) from exc
        return tuple(records)

    def validate_record(self, record: Any) -> list[str]:
        """Return the required fields missing from a record."""
        if not isinstance(record, dict):
            return list(self.REQUIRED_FIELDS)
        return [name for name in self.REQUIRED_FIELDS if name not in record]

    def __len__(self) -> int:
        return len(self.records)

    def label_counts(self, target: str) -> dict[str, int]:
        """Number of records per class for a target label."""
        counts: dict[str, int] = {}
        for record in self.records:
            label = record.label(target).value
            counts[label] = counts.get(label, 0) + 1
        return counts
