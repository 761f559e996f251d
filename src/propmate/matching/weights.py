"""Pesos del score compuesto."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from propmate.config import Settings, get_settings


class MatchWeights(BaseModel):
    """
    Pesos por criterio. Es un valor inmutable que se pasa explícitamente
    en cada llamada; el motor nunca lo modifica ni lo renormaliza.
    """

    model_config = ConfigDict(frozen=True)

    budget: float = Field(0.30, ge=0)
    location: float = Field(0.25, ge=0)
    bhk: float = Field(0.15, ge=0)
    furnishing: float = Field(0.10, ge=0)
    lifestyle: float = Field(0.10, ge=0)
    availability: float = Field(0.10, ge=0)

    @model_validator(mode="after")
    def _check_not_all_zero(self) -> "MatchWeights":
        if self.total <= 0:
            raise ValueError("At least one weight must be greater than zero")
        return self

    @property
    def total(self) -> float:
        return (
            self.budget
            + self.location
            + self.bhk
            + self.furnishing
            + self.lifestyle
            + self.availability
        )


DEFAULT_WEIGHTS = MatchWeights()


def weights_from_settings(settings: Optional[Settings] = None) -> MatchWeights:
    """Construye los pesos a partir de la configuración (variables WEIGHT_*)."""
    settings = settings or get_settings()
    return MatchWeights(
        budget=settings.weight_budget,
        location=settings.weight_location,
        bhk=settings.weight_bhk,
        furnishing=settings.weight_furnishing,
        lifestyle=settings.weight_lifestyle,
        availability=settings.weight_availability,
    )
