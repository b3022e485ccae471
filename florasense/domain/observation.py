"""
Plant Observation Domain Objects
================================
Dataclasses for one agronomic observation of a plant, the labelled form used
for training, and the pest indicators a pest score is derived from.

Observations hold raw values as entered. Category membership and numeric
types are checked upstream by the request schemas and again by the feature
encoder, which refuses anything it cannot map.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from florasense.enums import GrowthType, HealthStatus, InsectVisibility, RiskLevel

# Field names used by the training dataset resource.
RECORD_FIELDS = (
    "species",
    "stage",
    "moisture",
    "pH",
    "light",
    "fertilizer",
    "leafColor",
    "wilting",
    "flowerCount",
    "height",
    "pestScore",
)
LABEL_FIELDS = ("HealthStatus", "GrowthType", "RiskLevel")

MAX_PEST_SCORE = 4


@dataclass(frozen=True)
class Observation:
    """Agronomic observation of a single plant."""

    species: str
    stage: str
    moisture: float  # soil moisture, %
    ph: float
    light: float  # hours/day
    fertilizer: bool
    leaf_color: str
    wilting: bool
    flower_count: int
    height: float  # cm
    pest_score: int = 0  # 0-4, see PestIndicators

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Observation:
        """Build from a dataset record. Missing fields come through as ``None``."""
        return cls(
            species=record.get("species"),
            stage=record.get("stage"),
            moisture=record.get("moisture"),
            ph=record.get("pH"),
            light=record.get("light"),
            fertilizer=record.get("fertilizer"),
            leaf_color=record.get("leafColor"),
            wilting=record.get("wilting"),
            flower_count=record.get("flowerCount"),
            height=record.get("height"),
            pest_score=record.get("pestScore"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "species": str(self.species),
            "stage": str(self.stage),
            "moisture": self.moisture,
            "ph": self.ph,
            "light": self.light,
            "fertilizer": self.fertilizer,
            "leaf_color": str(self.leaf_color),
            "wilting": self.wilting,
            "flower_count": self.flower_count,
            "height": self.height,
            "pest_score": self.pest_score,
        }


@dataclass(frozen=True)
class LabeledObservation:
    """Training sample: an observation with its three ground-truth labels."""

    observation: Observation
    health_status: HealthStatus
    growth_type: GrowthType
    risk_level: RiskLevel

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> LabeledObservation:
        """
        Build from a dataset record.

        Raises:
            KeyError: if a label field is absent
            ValueError: if a label is not a member of its class set
        """
        return cls(
            observation=Observation.from_record(record),
            health_status=HealthStatus(record["HealthStatus"]),
            growth_type=GrowthType(record["GrowthType"]),
            risk_level=RiskLevel(record["RiskLevel"]),
        )

    def label(self, target: str) -> str:
        """Return the label for a target name (``HealthStatus``, ``GrowthType``, ``RiskLevel``)."""
        return {
            "HealthStatus": self.health_status,
            "GrowthType": self.growth_type,
            "RiskLevel": self.risk_level,
        }[target]


@dataclass(frozen=True)
class PestIndicators:
    """Independent yes/no pest signs reported by the user."""

    white_powder: bool = False
    holes_in_leaves: bool = False
    sticky_leaves: bool = False
    insect_visibility: InsectVisibility = InsectVisibility.NONE

    @property
    def insects_visible(self) -> bool:
        return self.insect_visibility != InsectVisibility.NONE

    @property
    def flags(self) -> tuple[bool, bool, bool, bool]:
        return (self.white_powder, self.holes_in_leaves, self.sticky_leaves, self.insects_visible)

    @property
    def score(self) -> int:
        """Number of indicators present, always within [0, 4]."""
        return sum(1 for present in self.flags if present)

    @property
    def any_present(self) -> bool:
        return any(self.flags)

    def to_dict(self) -> dict[str, Any]:
        return {
            "white_powder": self.white_powder,
            "holes_in_leaves": self.holes_in_leaves,
            "sticky_leaves": self.sticky_leaves,
            "insect_visibility": self.insect_visibility.value,
            "score": self.score,
        }
