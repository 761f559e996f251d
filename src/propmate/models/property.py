"""
Modelo de Propiedad.

Registro de inventario tal como lo guarda el CRM. El motor de matching
lo consume en modo lectura.
"""

from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from propmate.models.enums import PropertyStatus, PropertyType, TransactionType
from propmate.models.fields import (
    BhkField,
    FurnishingField,
    Identity,
    LenientBool,
    LenientDate,
    LenientDatetime,
    LenientFloat,
    LenientInt,
    Text,
    TextList,
    lenient_enum,
    to_location,
)

RECORD_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
    extra="ignore",
)


class PropertyLocation(BaseModel):
    """Ubicación de la propiedad."""

    model_config = RECORD_CONFIG

    address: Text = ""
    area: Text = Field("", description="Barrio / zona")
    city: Text = ""


class Property(BaseModel):
    """Propiedad del inventario de la agencia."""

    model_config = RECORD_CONFIG

    # Identificadores
    id: Identity = Field(None, description="ID del CRM")
    tenant_id: Identity = Field(None, description="Agencia dueña del registro")

    # Descripción
    title: Text = ""
    description: Text = ""
    type: Annotated[Optional[PropertyType], lenient_enum(PropertyType)] = None
    transaction_type: Annotated[
        Optional[TransactionType], lenient_enum(TransactionType)
    ] = None

    # Precio
    price: LenientFloat = Field(None, description="Precio pedido (renta mensual o venta)")
    negotiable: LenientBool = False

    # Superficie y edificio
    carpet_area: LenientFloat = Field(None, description="Superficie útil en ft²")
    built_up_area: LenientFloat = Field(None, description="Superficie construida en ft²")
    bhk: BhkField = None
    floor_number: LenientInt = None
    total_floors: LenientInt = None
    building_name: Text = ""
    facing: Text = ""
    age_of_building: LenientInt = None
    furnishing: FurnishingField = None

    # Amenities
    parking: LenientBool = False
    lift_available: LenientBool = False
    power_backup: LenientBool = False
    pets_allowed: LenientBool = False
    bachelors_allowed: LenientBool = False

    # Estado
    availability_date: LenientDate = None
    status: Annotated[Optional[PropertyStatus], lenient_enum(PropertyStatus)] = None
    photos: TextList = Field(default_factory=list)
    location: Annotated[PropertyLocation, BeforeValidator(to_location)] = Field(
        default_factory=PropertyLocation
    )

    # Metadatos
    created_at: LenientDatetime = None
