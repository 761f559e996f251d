"""
Resultado del matching cliente ↔ propiedad.

Es efímero: se crea por consulta y no se persiste.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ScoreBreakdown(BaseModel):
    """Subscores por criterio, cada uno entre 0 y 100."""

    model_config = ConfigDict(frozen=True)

    budget: float = Field(ge=0, le=100)
    location: float = Field(ge=0, le=100)
    bhk: float = Field(ge=0, le=100)
    furnishing: float = Field(ge=0, le=100)
    lifestyle: float = Field(ge=0, le=100)
    availability: float = Field(ge=0, le=100)


class MatchResult(BaseModel):
    """Score compuesto, desglose y razones legibles para un par."""

    model_config = ConfigDict(frozen=True)

    property_id: str
    client_id: str
    score: int = Field(ge=0, le=100, description="Score compuesto")
    breakdown: ScoreBreakdown
    reasons: tuple[str, ...] = ()

    def to_display_dict(self) -> dict[str, Any]:
        """Forma que espera la pantalla de matching del CRM."""
        return {
            "propertyId": self.property_id,
            "clientId": self.client_id,
            "score": self.score,
            "breakdown": {
                "budget": self.breakdown.budget,
                "area": self.breakdown.location,
                "bhk": self.breakdown.bhk,
                "furnishing": self.breakdown.furnishing,
                "lifestyle": self.breakdown.lifestyle,
                "availability": self.breakdown.availability,
            },
            "reasons": list(self.reasons),
        }
