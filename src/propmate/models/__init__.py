"""
Modelos de datos del sistema.

- Registros del CRM: Client, Property (entrada del matching)
- MatchResult: salida efímera del motor
"""

from propmate.models.client import Client
from propmate.models.enums import (
    Bhk,
    FurnishingStatus,
    LeadStage,
    MaritalStatus,
    PropertyStatus,
    PropertyType,
    TransactionType,
)
from propmate.models.match import MatchResult, ScoreBreakdown
from propmate.models.property import Property, PropertyLocation

__all__ = [
    # Registros
    "Client",
    "Property",
    "PropertyLocation",
    # Resultado
    "MatchResult",
    "ScoreBreakdown",
    # Enums
    "Bhk",
    "FurnishingStatus",
    "LeadStage",
    "MaritalStatus",
    "PropertyStatus",
    "PropertyType",
    "TransactionType",
]
