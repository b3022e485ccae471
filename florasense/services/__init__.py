"""
Service Organization
====================
Services are organized by their role:

**ai/**
  Classifiers and advisors. Stateless apart from trained model weights.
  Examples: PlantHealthAdvisor, SpeciesConsistencyChecker

**application/**
  Singleton services managed by ServiceContainer. One instance per application.
  Examples: DiagnosisService, AnalyticsService
"""
