"""
Domain Value Objects Package
=============================
Contains immutable value objects following Domain-Driven Design patterns.

Value objects are immutable objects that represent descriptive aspects of the domain
with no conceptual identity. They are defined only by their attributes.
"""

from .observation import LabeledObservation, Observation, PestIndicators
from .species_ideals import SPECIES_IDEALS, IdealRange, SpeciesProfile, get_species_profile

__all__ = [
    # Observations
    "Observation",
    "LabeledObservation",
    "PestIndicators",
    # Species ideals
    "IdealRange",
    "SpeciesProfile",
    "SPECIES_IDEALS",
    "get_species_profile",
]
