"""
Schemas Module
==============

This module provides Pydantic models for request/response validation.
Schemas ensure data integrity and provide automatic validation.
"""

from florasense.schemas.diagnosis import DiagnosisRequest

__all__ = [
    "DiagnosisRequest",
]
