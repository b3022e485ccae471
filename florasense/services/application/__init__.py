from .analytics_service import AnalyticsReport, AnalyticsService, ChartData
from .diagnosis_service import DiagnosisReport, DiagnosisService

__all__ = [
    "AnalyticsReport",
    "AnalyticsService",
    "ChartData",
    "DiagnosisReport",
    "DiagnosisService",
]
