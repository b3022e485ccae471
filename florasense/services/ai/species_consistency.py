"""
Species Consistency Check
=========================
Compares the user's soil, light and height readings against the ideal
ranges of the selected species.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from florasense.domain.observation import Observation
from florasense.domain.species_ideals import IdealRange, get_species_profile
from florasense.enums import ConsistencyStatus

logger = logging.getLogger(__name__)


@dataclass
class ConsistencyDetail:
    """Outcome for one growing parameter."""

    parameter: str
    label: str
    user_value: float
    ideal: IdealRange
    status: ConsistencyStatus

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "parameter": self.parameter,
            "label": self.label,
            "user_value": self.user_value,
            "ideal": self.ideal.ideal,
            "min": self.ideal.min,
            "max": self.ideal.max,
            "unit": self.ideal.unit,
            "user": f"{self.user_value} {self.ideal.unit}",
            "range": f"({self.ideal.min} - {self.ideal.max} {self.ideal.unit})",
            "status": self.status.value,
        }


@dataclass
class ConsistencyResult:
    """Species consistency summary; consistent only if every parameter is in range."""

    species: str
    details: list[ConsistencyDetail] = field(default_factory=list)

    @property
    def is_consistent(self) -> bool:
        return all(detail.status == ConsistencyStatus.CONSISTENT for detail in self.details)

    @property
    def message(self) -> str:
        if self.is_consistent:
            return "Consistent with Species Requirements"
        return "Warning: Your entered conditions mismatch typical species needs."

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "species": self.species,
            "is_consistent": self.is_consistent,
            "message": self.message,
            "details": [detail.to_dict() for detail in self.details],
        }


class SpeciesConsistencyChecker:
    """Rule-based check of an observation against its species' ideal ranges."""

    # (parameter, display label, observation attribute)
    PARAMETERS = (
        ("moisture", "Soil Moisture", "moisture"),
        ("ph", "Soil pH", "ph"),
        ("light", "Light Exposure", "light"),
        ("height", "Plant Height", "height"),
    )

    def check(self, observation: Observation) -> ConsistencyResult:
        """
        Check moisture, pH, light and height against the species bounds.

        Raises:
            NotFoundError: if the species has no ideal profile
        """
        profile = get_species_profile(observation.species)
        result = ConsistencyResult(species=profile.species.value)

        for parameter, label, attribute in self.PARAMETERS:
            ideal: IdealRange = getattr(profile, parameter)
            value = getattr(observation, attribute)
            status = ConsistencyStatus.CONSISTENT if ideal.contains(value) else ConsistencyStatus.WARNING
            result.details.append(
                ConsistencyDetail(parameter=parameter, label=label, user_value=value, ideal=ideal, status=status)
            )

        if not result.is_consistent:
            flagged = [d.parameter for d in result.details if d.status == ConsistencyStatus.WARNING]
            logger.debug("%s readings outside ideal range: %s", profile.species.value, flagged)
        return result
