"""
Normalizador de atributos.

Lleva un par Cliente/Propiedad a valores directamente comparables:
precios y presupuestos válidos o None, strings de ciudad/barrio en
minúsculas y sin espacios sobrantes, amoblamiento en escala ordinal y
la diferencia en días entre mudanza y disponibilidad.

None significa "inválido" y los criterios lo tratan como el peor caso.
Nada de este módulo lanza excepciones por datos raros.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from propmate.models import Bhk, Client, FurnishingStatus, MaritalStatus, Property


@dataclass(frozen=True)
class NormalizedClient:
    id: Optional[str]
    budget_min: Optional[float]
    budget_max: Optional[float]
    city: str
    areas: tuple[str, ...]
    bhks: frozenset[Bhk]
    furnishing_levels: frozenset[int]
    accepts_any_furnishing: bool
    is_bachelor: bool
    family_size: Optional[int]
    move_in_date: Optional[date]
    created_at: Optional[datetime]


@dataclass(frozen=True)
class NormalizedProperty:
    id: Optional[str]
    price: Optional[float]
    city: str
    area: str
    bhk: Optional[Bhk]
    furnishing: Optional[FurnishingStatus]
    furnishing_level: Optional[int]
    has_parking: bool
    bachelors_allowed: bool
    availability_date: Optional[date]
    created_at: Optional[datetime]


@dataclass(frozen=True)
class NormalizedPair:
    client: NormalizedClient
    property: NormalizedProperty
    day_gap: Optional[int]


def normalize_text(value: Optional[str]) -> str:
    """'  Bandra West ' -> 'bandra west'"""
    if not value:
        return ""
    return " ".join(value.split()).lower()


def valid_amount(value: Optional[float]) -> Optional[float]:
    """Montos negativos o ausentes pasan a None."""
    if value is None or value < 0:
        return None
    return value


def day_gap(first: Optional[date], second: Optional[date]) -> Optional[int]:
    """Diferencia absoluta en días; None si falta alguna fecha."""
    if first is None or second is None:
        return None
    return abs((first - second).days)


def _budget_range(
    budget_min: Optional[float], budget_max: Optional[float]
) -> tuple[Optional[float], Optional[float]]:
    low = valid_amount(budget_min)
    high = valid_amount(budget_max)
    if high is None:
        # Sin tope no hay contra qué medir el precio
        return low, None
    if low is None:
        return 0.0, high
    if low > high:
        low, high = high, low
    return low, high


def normalize_client(client: Client) -> NormalizedClient:
    budget_min, budget_max = _budget_range(client.budget_min, client.budget_max)

    areas: list[str] = []
    for area in client.preferred_areas:
        key = normalize_text(area)
        if key and key not in areas:
            areas.append(key)

    levels = frozenset(
        f.level for f in client.furnishing_preference if f.level is not None
    )

    family_size = client.family_size
    if family_size is not None and family_size < 0:
        family_size = None

    return NormalizedClient(
        id=client.id,
        budget_min=budget_min,
        budget_max=budget_max,
        city=normalize_text(client.preferred_city),
        areas=tuple(areas),
        bhks=frozenset(client.bhk_preference),
        furnishing_levels=levels,
        accepts_any_furnishing=FurnishingStatus.ANY in client.furnishing_preference,
        is_bachelor=client.marital_status is MaritalStatus.BACHELOR,
        family_size=family_size,
        move_in_date=client.move_in_date,
        created_at=client.created_at,
    )


def normalize_property(prop: Property) -> NormalizedProperty:
    furnishing = prop.furnishing
    if furnishing is FurnishingStatus.ANY:
        # "Any" solo tiene sentido como preferencia del cliente
        furnishing = None

    return NormalizedProperty(
        id=prop.id,
        price=valid_amount(prop.price),
        city=normalize_text(prop.location.city),
        area=normalize_text(prop.location.area),
        bhk=prop.bhk,
        furnishing=furnishing,
        furnishing_level=furnishing.level if furnishing else None,
        has_parking=prop.parking,
        bachelors_allowed=prop.bachelors_allowed,
        availability_date=prop.availability_date,
        created_at=prop.created_at,
    )


def normalize_pair(client: Client, prop: Property) -> NormalizedPair:
    normalized_client = normalize_client(client)
    normalized_property = normalize_property(prop)
    return NormalizedPair(
        client=normalized_client,
        property=normalized_property,
        day_gap=day_gap(
            normalized_client.move_in_date, normalized_property.availability_date
        ),
    )
