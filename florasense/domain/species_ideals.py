"""
Species Ideal Profiles: Domain Data
====================================
Single source of truth for the per-species ideal growing ranges used by
:class:`SpeciesConsistencyChecker`, :class:`RuleBasedRecommendationProvider`
and :class:`InsightGenerator`.

The classifier never reads this table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from florasense.domain.exceptions import NotFoundError
from florasense.enums import Species


@dataclass(frozen=True)
class IdealRange:
    """Ideal value and acceptable bounds for one growing parameter."""

    ideal: float
    min: float
    max: float
    unit: str

    def contains(self, value: float) -> bool:
        """Inclusive bounds check."""
        return self.min <= value <= self.max

    def to_dict(self) -> dict[str, Any]:
        return {"ideal": self.ideal, "min": self.min, "max": self.max, "unit": self.unit}


@dataclass(frozen=True)
class SpeciesProfile:
    """Ideal moisture, pH, light and height for a species."""

    species: Species
    moisture: IdealRange
    ph: IdealRange
    light: IdealRange
    height: IdealRange

    def to_dict(self) -> dict[str, Any]:
        return {
            "species": self.species.value,
            "moisture": self.moisture.to_dict(),
            "ph": self.ph.to_dict(),
            "light": self.light.to_dict(),
            "height": self.height.to_dict(),
        }


# ---------------------------------------------------------------------------
# Ideal profiles
# ---------------------------------------------------------------------------
SPECIES_IDEALS: dict[Species, SpeciesProfile] = {
    Species.ROSE: SpeciesProfile(
        species=Species.ROSE,
        moisture=IdealRange(ideal=60, min=45, max=75, unit="%"),
        ph=IdealRange(ideal=6.5, min=6.0, max=7.0, unit="pH"),
        light=IdealRange(ideal=8, min=6, max=10, unit="hours/day"),
        height=IdealRange(ideal=60, min=40, max=100, unit="cm"),
    ),
    Species.MARIGOLD: SpeciesProfile(
        species=Species.MARIGOLD,
        moisture=IdealRange(ideal=50, min=35, max=65, unit="%"),
        ph=IdealRange(ideal=6.0, min=5.5, max=6.5, unit="pH"),
        light=IdealRange(ideal=7, min=5, max=9, unit="hours/day"),
        height=IdealRange(ideal=40, min=25, max=60, unit="cm"),
    ),
    Species.JASMINE: SpeciesProfile(
        species=Species.JASMINE,
        moisture=IdealRange(ideal=70, min=55, max=85, unit="%"),
        ph=IdealRange(ideal=6.0, min=5.0, max=7.0, unit="pH"),
        light=IdealRange(ideal=6, min=4, max=8, unit="hours/day"),
        height=IdealRange(ideal=120, min=80, max=200, unit="cm"),
    ),
    Species.SUNFLOWER: SpeciesProfile(
        species=Species.SUNFLOWER,
        moisture=IdealRange(ideal=55, min=40, max=70, unit="%"),
        ph=IdealRange(ideal=6.8, min=6.0, max=7.5, unit="pH"),
        light=IdealRange(ideal=10, min=8, max=12, unit="hours/day"),
        height=IdealRange(ideal=150, min=100, max=300, unit="cm"),
    ),
    Species.HIBISCUS: SpeciesProfile(
        species=Species.HIBISCUS,
        moisture=IdealRange(ideal=65, min=50, max=80, unit="%"),
        ph=IdealRange(ideal=6.2, min=5.5, max=7.0, unit="pH"),
        light=IdealRange(ideal=9, min=7, max=11, unit="hours/day"),
        height=IdealRange(ideal=80, min=50, max=150, unit="cm"),
    ),
    Species.TULIP: SpeciesProfile(
        species=Species.TULIP,
        moisture=IdealRange(ideal=45, min=30, max=60, unit="%"),
        ph=IdealRange(ideal=6.5, min=6.0, max=7.5, unit="pH"),
        light=IdealRange(ideal=5, min=3, max=7, unit="hours/day"),
        height=IdealRange(ideal=30, min=15, max=45, unit="cm"),
    ),
}


def get_species_profile(species: str | Species) -> SpeciesProfile:
    """
    Look up the ideal profile for a species.

    Raises:
        NotFoundError: if the species has no profile
    """
    try:
        key = Species(species)
    except ValueError:
        raise NotFoundError(f"Unknown species: {species}", detail={"species": str(species)}) from None
    return SPECIES_IDEALS[key]
