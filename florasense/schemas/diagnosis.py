"""
Diagnosis Schemas
=================

Pydantic models for diagnosis request validation.

Field aliases match the names used by the diagnosis form (``fertilizerUsed``,
``plantHeight`` ...); snake_case names are accepted as well.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from florasense.domain.observation import Observation, PestIndicators
from florasense.enums import GrowthStage, InsectVisibility, LeafColor, Species

_YES = {"yes", "y", "true", "1", "on"}
_NO = {"no", "n", "false", "0", "off"}


def _coerce_enum(enum_cls: type[Enum], value: Any) -> Any:
    """Match an enum by value, ignoring case and surrounding whitespace."""
    if isinstance(value, str):
        wanted = value.strip().lower()
        for member in enum_cls:
            if member.value.lower() == wanted:
                return member
    return value


def _coerce_yes_no(value: Any) -> Any:
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _YES:
            return True
        if lowered in _NO:
            return False
    return value


class DiagnosisRequest(BaseModel):
    """Observation submitted for diagnosis, with the form's validation bounds."""

    species: Species = Field(..., description="Flower species")
    stage: GrowthStage = Field(..., description="Growth stage")
    moisture: float = Field(..., ge=5, le=100, description="Soil moisture %")
    ph: float = Field(..., ge=4.0, le=9.0, description="Soil pH")
    light: float = Field(..., ge=1, le=24, description="Light exposure in hours/day")
    fertilizer_used: bool = Field(..., alias="fertilizerUsed", description="Fertilizer applied recently")
    leaf_color: LeafColor = Field(..., alias="leafColor", description="Observed leaf colour")
    wilting_signs: bool = Field(..., alias="wiltingSigns", description="Wilting present")
    flower_count: int = Field(..., ge=0, le=1000, alias="flowerCount", description="Flowers and buds")
    plant_height: float = Field(..., ge=1, le=500, alias="plantHeight", description="Plant height in cm")
    white_powder: bool = Field(default=False, alias="whitePowder", description="White powder on leaves")
    holes_in_leaves: bool = Field(default=False, alias="holesInLeaves", description="Holes in leaves")
    sticky_leaves: bool = Field(default=False, alias="stickyLeaves", description="Sticky residue on leaves")
    insect_visibility: InsectVisibility = Field(
        default=InsectVisibility.NONE, alias="insectVisibility", description="Visible insects"
    )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "species": "Rose",
                "stage": "Flowering",
                "moisture": 60,
                "ph": 6.5,
                "light": 8,
                "fertilizerUsed": "Yes",
                "leafColor": "Normal",
                "wiltingSigns": "No",
                "flowerCount": 15,
                "plantHeight": 65,
                "whitePowder": "No",
                "holesInLeaves": "No",
                "stickyLeaves": "No",
                "insectVisibility": "None",
            }
        },
    )

    @field_validator("species", mode="before")
    @classmethod
    def normalize_species(cls, v):
        return _coerce_enum(Species, v)

    @field_validator("stage", mode="before")
    @classmethod
    def normalize_stage(cls, v):
        return _coerce_enum(GrowthStage, v)

    @field_validator("leaf_color", mode="before")
    @classmethod
    def normalize_leaf_color(cls, v):
        return _coerce_enum(LeafColor, v)

    @field_validator("insect_visibility", mode="before")
    @classmethod
    def normalize_insect_visibility(cls, v):
        if v is None or v == "":
            return InsectVisibility.NONE
        return _coerce_enum(InsectVisibility, v)

    @field_validator(
        "fertilizer_used",
        "wilting_signs",
        "white_powder",
        "holes_in_leaves",
        "sticky_leaves",
        mode="before",
    )
    @classmethod
    def parse_yes_no(cls, v):
        """Accept the form's Yes/No radio values."""
        return _coerce_yes_no(v)

    def to_pest_indicators(self) -> PestIndicators:
        return PestIndicators(
            white_powder=self.white_powder,
            holes_in_leaves=self.holes_in_leaves,
            sticky_leaves=self.sticky_leaves,
            insect_visibility=self.insect_visibility,
        )

    def to_observation(self) -> Observation:
        """Observation with the pest score aggregated from the four indicators."""
        return Observation(
            species=self.species,
            stage=self.stage,
            moisture=self.moisture,
            ph=self.ph,
            light=self.light,
            fertilizer=self.fertilizer_used,
            leaf_color=self.leaf_color,
            wilting=self.wilting_signs,
            flower_count=self.flower_count,
            height=self.plant_height,
            pest_score=self.to_pest_indicators().score,
        )
