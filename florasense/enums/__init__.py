"""
Enums Module
============

This module provides enumeration types for the FloraSense application.
Enums ensure type safety and consistency across the codebase.
"""

from florasense.enums.common import (
    ConsistencyStatus,
    GrowthType,
    HealthStatus,
    InsectVisibility,
    Priority,
    RiskLevel,
)
from florasense.enums.growth import GrowthStage, LeafColor, Species

__all__ = [
    # Classifier labels
    "HealthStatus",
    "GrowthType",
    "RiskLevel",
    # Observation
    "Species",
    "GrowthStage",
    "LeafColor",
    "InsectVisibility",
    # Advisors
    "Priority",
    "ConsistencyStatus",
]
