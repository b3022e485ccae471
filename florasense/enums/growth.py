"""
Growth-related Enumerations
============================

This module contains the enums describing a plant as the user observes it:
its species, growth stage and leaf colour.
"""

from enum import Enum


class Species(str, Enum):
    """Flower species with a known ideal profile"""

    ROSE = "Rose"
    MARIGOLD = "Marigold"
    JASMINE = "Jasmine"
    SUNFLOWER = "Sunflower"
    HIBISCUS = "Hibiscus"
    TULIP = "Tulip"

    def __str__(self):
        return self.value


class GrowthStage(str, Enum):
    """Growth stages, declared in ordinal order (Seedling < ... < Flowering)"""

    SEEDLING = "Seedling"
    VEGETATIVE = "Vegetative"
    BUDDING = "Budding"
    FLOWERING = "Flowering"

    def __str__(self):
        return self.value

    @property
    def is_reproductive(self) -> bool:
        return self in (GrowthStage.BUDDING, GrowthStage.FLOWERING)


class LeafColor(str, Enum):
    """Observed leaf colour, declared in ordinal order (Pale < ... < Dark Green)"""

    PALE = "Pale"
    YELLOW = "Yellow"
    NORMAL = "Normal"
    DARK_GREEN = "Dark Green"

    def __str__(self):
        return self.value
