"""Generador de razones.

Traduce los subscores a frases legibles para el agente. Se evalúa en el
orden fijo de los criterios (presupuesto → ubicación → BHK →
amoblamiento → estilo de vida → disponibilidad):

- subscore >= 80: razón positiva
- subscore < 40: advertencia
- en el medio: nada

Mismo par, mismas razones en el mismo orden.
"""

from typing import Callable, Optional

from propmate.config import CAUTION_REASON_THRESHOLD, POSITIVE_REASON_THRESHOLD
from propmate.models import ScoreBreakdown

from .criteria import CRITERIA, bachelor_conflict, bhk_distance, parking_conflict
from .normalizer import NormalizedPair


# Tope del porcentaje que se muestra en las razones
MAX_PERCENT_SHOWN = 999


def _percent_over(price: float, budget_max: float) -> int:
    if budget_max <= 0:
        return MAX_PERCENT_SHOWN + 1
    percent = (price - budget_max) / budget_max * 100
    return int(round(min(percent, MAX_PERCENT_SHOWN + 1)))


def budget_reason(pair: NormalizedPair, score: float) -> Optional[str]:
    price = pair.property.price
    client = pair.client

    if score >= POSITIVE_REASON_THRESHOLD:
        if price is not None and client.budget_min and price < client.budget_min:
            return "Priced below budget range"
        if price is not None and client.budget_max is not None and price > client.budget_max:
            return f"Slightly over budget ({_percent_over(price, client.budget_max)}%)"
        return "Within budget"

    if score < CAUTION_REASON_THRESHOLD:
        if price is None:
            return "Price missing, budget fit unknown"
        if client.budget_max is None:
            return "Client budget missing"
        percent = _percent_over(price, client.budget_max)
        if percent > MAX_PERCENT_SHOWN:
            return f"Over budget by more than {MAX_PERCENT_SHOWN}%"
        return f"Over budget by {percent}%"

    return None


def location_reason(pair: NormalizedPair, score: float) -> Optional[str]:
    client = pair.client
    prop = pair.property

    if score >= POSITIVE_REASON_THRESHOLD:
        if client.areas and prop.area in client.areas:
            return "Exact area match"
        return "In preferred city"

    if score < CAUTION_REASON_THRESHOLD:
        if not prop.city and not prop.area:
            return "Property location missing"
        if not client.city and not client.areas:
            return "No location preference recorded"
        if client.city and prop.city != client.city:
            return "Different city than preferred"
        return "Not in a preferred area"

    return None


def bhk_reason(pair: NormalizedPair, score: float) -> Optional[str]:
    bhk = pair.property.bhk

    if score >= POSITIVE_REASON_THRESHOLD:
        return f"{bhk.value} matches requested configuration"

    if score < CAUTION_REASON_THRESHOLD:
        if bhk is None:
            return "Room configuration missing"
        if bhk_distance(pair) is None:
            return "No room configuration preference recorded"
        return f"{bhk.value} is far from requested configuration"

    return None


def furnishing_reason(pair: NormalizedPair, score: float) -> Optional[str]:
    if score >= POSITIVE_REASON_THRESHOLD:
        if pair.client.accepts_any_furnishing:
            return "Any furnishing acceptable"
        return f"{pair.property.furnishing.value} furnishing as preferred"

    if score < CAUTION_REASON_THRESHOLD:
        if pair.property.furnishing is None:
            return "Furnishing status missing"
        return f"{pair.property.furnishing.value} furnishing differs from preference"

    return None


def lifestyle_reason(pair: NormalizedPair, score: float) -> Optional[str]:
    if score >= POSITIVE_REASON_THRESHOLD:
        return "Fits household lifestyle"

    if score < CAUTION_REASON_THRESHOLD:
        issues = []
        if bachelor_conflict(pair):
            issues.append("bachelors not allowed")
        if parking_conflict(pair):
            issues.append("no parking for a large family")
        return "Lifestyle restrictions: " + ", ".join(issues or ["house rules"])

    return None


def availability_reason(pair: NormalizedPair, score: float) -> Optional[str]:
    if score >= POSITIVE_REASON_THRESHOLD:
        return "Available around move-in date"

    if score < CAUTION_REASON_THRESHOLD:
        if pair.day_gap is None:
            return "Availability or move-in date missing"
        return f"Availability is {pair.day_gap} days from move-in date"

    return None


REASON_RULES: dict[str, Callable[[NormalizedPair, float], Optional[str]]] = {
    "budget": budget_reason,
    "location": location_reason,
    "bhk": bhk_reason,
    "furnishing": furnishing_reason,
    "lifestyle": lifestyle_reason,
    "availability": availability_reason,
}


def generate_reasons(
    pair: NormalizedPair, breakdown: ScoreBreakdown
) -> tuple[str, ...]:
    """Razones en el orden fijo de los criterios."""
    reasons = []
    for name in CRITERIA:
        reason = REASON_RULES[name](pair, getattr(breakdown, name))
        if reason:
            reasons.append(reason)
    return tuple(reasons)
