"""
Scoring de un par cliente ↔ propiedad.

Todo es cálculo puro y sincrónico: sin I/O, sin cache, sin estado
compartido. Cada par se puede evaluar en paralelo sin coordinación.
"""

from collections.abc import Mapping
from typing import Any, Union

from propmate.exceptions import InvalidMatchInputError
from propmate.models import Client, MatchResult, Property

from .aggregator import build_breakdown, composite_score
from .normalizer import NormalizedPair, normalize_pair
from .reasons import generate_reasons
from .weights import DEFAULT_WEIGHTS, MatchWeights

ClientInput = Union[Client, Mapping[str, Any]]
PropertyInput = Union[Property, Mapping[str, Any]]


def as_client(value: ClientInput) -> Client:
    """Acepta el modelo o el dict crudo que entrega el CRM."""
    if isinstance(value, Client):
        return value
    if isinstance(value, Mapping):
        return Client.model_validate(value)
    raise InvalidMatchInputError("client", f"unsupported type {type(value).__name__}")


def as_property(value: PropertyInput) -> Property:
    if isinstance(value, Property):
        return value
    if isinstance(value, Mapping):
        return Property.model_validate(value)
    raise InvalidMatchInputError("property", f"unsupported type {type(value).__name__}")


def check_identity(client: Client, prop: Property) -> None:
    if not client.id:
        raise InvalidMatchInputError("client")
    if not prop.id:
        raise InvalidMatchInputError("property")


def score_pair(pair: NormalizedPair, weights: MatchWeights = DEFAULT_WEIGHTS) -> MatchResult:
    """Puntúa un par ya normalizado (ids ya validados)."""
    breakdown = build_breakdown(pair)
    return MatchResult(
        property_id=pair.property.id,
        client_id=pair.client.id,
        score=composite_score(breakdown, weights),
        breakdown=breakdown,
        reasons=generate_reasons(pair, breakdown),
    )


def score_match(
    client: ClientInput,
    prop: PropertyInput,
    weights: MatchWeights = DEFAULT_WEIGHTS,
) -> MatchResult:
    """
    Calcula el MatchResult de un cliente contra una propiedad.

    Args:
        client: Cliente (modelo o dict del CRM)
        prop: Propiedad (modelo o dict del CRM)
        weights: Pesos del score compuesto

    Returns:
        MatchResult con score, desglose y razones

    Raises:
        InvalidMatchInputError: si falta el id del cliente o de la propiedad
    """
    client = as_client(client)
    prop = as_property(prop)
    check_identity(client, prop)
    return score_pair(normalize_pair(client, prop), weights)
