"""
Modelo de Cliente.

Incluye los requisitos de vivienda que usa el motor de matching
(presupuesto, ubicación, BHK, amoblamiento, fecha de mudanza) y los
datos de pipeline que solo se usan para filtrar.
"""

from typing import Annotated, Optional

from pydantic import BaseModel, Field

from propmate.models.enums import LeadStage, MaritalStatus, TransactionType
from propmate.models.fields import (
    BhkList,
    FurnishingList,
    Identity,
    LenientDate,
    LenientDatetime,
    LenientFloat,
    LenientInt,
    Text,
    TextList,
    lenient_enum,
)
from propmate.models.property import RECORD_CONFIG


class Client(BaseModel):
    """Cliente (lead) de la agencia con sus requisitos."""

    model_config = RECORD_CONFIG

    # Identificadores
    id: Identity = Field(None, description="ID del CRM")
    tenant_id: Identity = Field(None, description="Agencia dueña del registro")

    # Contacto
    name: Text = ""
    phone: Text = ""
    email: Optional[str] = None
    profession: Optional[str] = None
    description: Text = Field("", description="Texto libre, no se puntúa")

    # Hogar
    marital_status: Annotated[
        Optional[MaritalStatus], lenient_enum(MaritalStatus)
    ] = None
    family_size: LenientInt = None

    # Requisitos
    requirement: Annotated[
        Optional[TransactionType], lenient_enum(TransactionType)
    ] = None
    budget_min: LenientFloat = None
    budget_max: LenientFloat = None
    preferred_city: Text = ""
    preferred_areas: TextList = Field(
        default_factory=list, description="Barrios aceptables, en orden de preferencia"
    )
    bhk_preference: BhkList = Field(default_factory=list)
    furnishing_preference: FurnishingList = Field(default_factory=list)
    move_in_date: LenientDate = None

    # Pipeline
    lead_stage: Annotated[Optional[LeadStage], lenient_enum(LeadStage)] = None
    tags: TextList = Field(default_factory=list)

    # Metadatos
    created_at: LenientDatetime = None
