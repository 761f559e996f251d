"""Criterios individuales de matching.

Cada función evalúa un solo eje del par (presupuesto, ubicación, BHK,
amoblamiento, estilo de vida, disponibilidad) y devuelve un score entre
0 y 100. Son puras y totales: un dato inválido baja el score a 0 en vez
de lanzar una excepción, así un campo roto no impide puntuar el resto.
"""

from typing import Callable, Optional

from propmate.config import (
    AVAILABILITY_GRACE_DAYS,
    AVAILABILITY_ZERO_DAYS,
    BACHELOR_PENALTY,
    BHK_STEP_SCORES,
    FURNISHING_STEP_PENALTY,
    LARGE_FAMILY_PARKING_PENALTY,
    LARGE_FAMILY_SIZE,
    SAME_CITY_OTHER_AREA_SCORE,
)

from .normalizer import NormalizedPair

MAX_SCORE = 100.0
MIN_SCORE = 0.0


def clamp_score(value: float) -> float:
    return max(MIN_SCORE, min(MAX_SCORE, value))


def score_budget(pair: NormalizedPair) -> float:
    """
    Dentro del rango o por debajo -> 100. Por encima del máximo decae
    linealmente y llega a 0 al doble del presupuesto.
    """
    price = pair.property.price
    budget_max = pair.client.budget_max
    if price is None or budget_max is None:
        return MIN_SCORE

    if price <= budget_max:
        return MAX_SCORE
    if budget_max == 0:
        return MIN_SCORE

    overshoot = (price - budget_max) / budget_max
    return clamp_score(MAX_SCORE - MAX_SCORE * overshoot)


def score_location(pair: NormalizedPair) -> float:
    """
    Barrio exacto -> 100, misma ciudad otro barrio -> 50, otra ciudad -> 0.
    Sin barrios preferidos, coincidir en la ciudad alcanza para 100.
    """
    client = pair.client
    prop = pair.property
    if not prop.city and not prop.area:
        return MIN_SCORE

    if not client.city:
        # Sin ciudad preferida solo podemos comparar barrios
        if client.areas and prop.area in client.areas:
            return MAX_SCORE
        return MIN_SCORE

    if prop.city != client.city:
        return MIN_SCORE

    if not client.areas or prop.area in client.areas:
        return MAX_SCORE

    return SAME_CITY_OTHER_AREA_SCORE


def bhk_distance(pair: NormalizedPair) -> Optional[int]:
    """Pasos en la escala canónica hasta el BHK aceptado más cercano."""
    bhk = pair.property.bhk
    if bhk is None or not pair.client.bhks:
        return None
    return min(abs(bhk.rank - accepted.rank) for accepted in pair.client.bhks)


def score_bhk(pair: NormalizedPair) -> float:
    distance = bhk_distance(pair)
    if distance is None or distance >= len(BHK_STEP_SCORES):
        return MIN_SCORE
    return BHK_STEP_SCORES[distance]


def furnishing_distance(pair: NormalizedPair) -> Optional[int]:
    level = pair.property.furnishing_level
    if level is None or not pair.client.furnishing_levels:
        return None
    return min(abs(level - accepted) for accepted in pair.client.furnishing_levels)


def score_furnishing(pair: NormalizedPair) -> float:
    """Comodín "Any" -> 100; si no, 100 - 40 por cada nivel de distancia."""
    if pair.client.accepts_any_furnishing:
        return MAX_SCORE

    distance = furnishing_distance(pair)
    if distance is None:
        return MIN_SCORE
    return clamp_score(MAX_SCORE - FURNISHING_STEP_PENALTY * distance)


def bachelor_conflict(pair: NormalizedPair) -> bool:
    return pair.client.is_bachelor and not pair.property.bachelors_allowed


def parking_conflict(pair: NormalizedPair) -> bool:
    family_size = pair.client.family_size
    return (
        family_size is not None
        and family_size > LARGE_FAMILY_SIZE
        and not pair.property.has_parking
    )


def score_lifestyle(pair: NormalizedPair) -> float:
    """Reglas fijas: soltero sin permiso de solteros, familia grande sin cochera."""
    score = MAX_SCORE
    if bachelor_conflict(pair):
        score -= BACHELOR_PENALTY
    if parking_conflict(pair):
        score -= LARGE_FAMILY_PARKING_PENALTY
    return clamp_score(score)


def score_availability(pair: NormalizedPair) -> float:
    """Hasta 7 días de diferencia -> 100; decae a 0 a los 90 días."""
    gap = pair.day_gap
    if gap is None:
        return MIN_SCORE
    if gap <= AVAILABILITY_GRACE_DAYS:
        return MAX_SCORE
    return clamp_score(MAX_SCORE - (MAX_SCORE / AVAILABILITY_ZERO_DAYS) * gap)


# Orden fijo de evaluación: también define el orden de las razones
CRITERIA: dict[str, Callable[[NormalizedPair], float]] = {
    "budget": score_budget,
    "location": score_location,
    "bhk": score_bhk,
    "furnishing": score_furnishing,
    "lifestyle": score_lifestyle,
    "availability": score_availability,
}
