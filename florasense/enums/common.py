"""
Common Enumerations
====================

This module contains the classifier label sets and the enums shared by the
rule-based advisors.
"""

from enum import Enum


class HealthStatus(str, Enum):
    """
    Plant health classification.
    Used by: training orchestrator, insight generator
    """
    HEALTHY = "Healthy"
    MODERATE = "Moderate"
    UNHEALTHY = "Unhealthy"

    def __str__(self) -> str:
        return self.value


class GrowthType(str, Enum):
    """
    Growth rate classification.
    Used by: training orchestrator, recommendation provider
    """
    SLOW = "Slow"
    NORMAL = "Normal"
    FAST = "Fast"

    def __str__(self) -> str:
        return self.value


class RiskLevel(str, Enum):
    """
    Risk levels for assessments.
    Used by: training orchestrator, recommendation provider
    """
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    def __str__(self) -> str:
        return self.value


class InsectVisibility(str, Enum):
    """
    How many insects the user can see on the plant.
    Anything other than NONE counts as one pest indicator.
    """
    NONE = "None"
    FEW = "Few"
    MODERATE = "Moderate"
    SEVERE = "Severe"

    def __str__(self) -> str:
        return self.value


class Priority(str, Enum):
    """
    Priority levels for recommendations.
    Used by: recommendation provider
    """
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"

    def __str__(self) -> str:
        return self.value


class ConsistencyStatus(str, Enum):
    """
    Outcome of comparing one reading against the species ideal range.
    Used by: species consistency checker
    """
    CONSISTENT = "consistent"
    WARNING = "warning"

    def __str__(self) -> str:
        return self.value
