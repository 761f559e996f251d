"""
Ranking de matches.

Puntúa un cliente contra un conjunto de propiedades (o una propiedad
contra un conjunto de clientes), descarta los resultados por debajo del
score mínimo, ordena de mayor a menor y trunca al top N.

Desempates, en orden:
1. registro de la contraparte más reciente (createdAt)
2. menor diferencia entre disponibilidad y mudanza
3. id de la contraparte, para que el orden no dependa del input
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

import structlog
from pydantic import BaseModel, ConfigDict, Field

from propmate.config import Settings, get_settings
from propmate.models import Client, LeadStage, MatchResult, Property, PropertyStatus

from .normalizer import (
    NormalizedClient,
    NormalizedPair,
    NormalizedProperty,
    day_gap,
    normalize_client,
    normalize_property,
)
from .scoring import (
    ClientInput,
    PropertyInput,
    as_client,
    as_property,
    check_identity,
    score_pair,
)
from .weights import DEFAULT_WEIGHTS, MatchWeights

logger = structlog.get_logger()


class RankOptions(BaseModel):
    """Opciones de ranking. Los filtros extra vienen apagados por defecto."""

    model_config = ConfigDict(frozen=True)

    min_score: int = Field(20, ge=0, le=100, description="Score mínimo para conservar un match")
    top_n: Optional[int] = Field(None, ge=1, description="Truncar a los N mejores")

    # Filtros previos al scoring
    statuses: Optional[frozenset[PropertyStatus]] = Field(
        None, description="Solo propiedades en estos estados (None = todas)"
    )
    match_transaction_type: bool = Field(
        False, description="Descartar pares con operación distinta (Rent/Sale/Lease)"
    )
    exclude_lead_stages: frozenset[LeadStage] = Field(
        default_factory=frozenset, description="Clientes en estas etapas no se evalúan"
    )
    same_tenant_only: bool = Field(
        False, description="Descartar pares de agencias distintas"
    )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **overrides) -> "RankOptions":
        settings = settings or get_settings()
        values = {
            "min_score": settings.match_min_score,
            "top_n": settings.match_top_n,
        }
        values.update(overrides)
        return cls(**values)


@dataclass(frozen=True)
class _RankedMatch:
    result: MatchResult
    counterpart_id: str
    created_at: Optional[datetime]
    day_gap: Optional[int]

    def sort_key(self) -> tuple:
        # Faltantes al final en cada desempate
        created = self.created_at
        return (
            -self.result.score,
            created is None,
            -created.timestamp() if created else 0.0,
            self.day_gap is None,
            self.day_gap if self.day_gap is not None else 0,
            self.counterpart_id,
        )


def filter_reason(client: Client, prop: Property, options: RankOptions) -> Optional[str]:
    """Motivo por el que el par no se evalúa, o None si pasa los filtros."""
    if options.statuses is not None and prop.status not in options.statuses:
        return "status"
    if (
        options.match_transaction_type
        and client.requirement is not None
        and prop.transaction_type is not None
        and client.requirement is not prop.transaction_type
    ):
        return "transaction_type"
    if client.lead_stage is not None and client.lead_stage in options.exclude_lead_stages:
        return "lead_stage"
    if (
        options.same_tenant_only
        and client.tenant_id
        and prop.tenant_id
        and client.tenant_id != prop.tenant_id
    ):
        return "tenant"
    return None


def _pair(client: NormalizedClient, prop: NormalizedProperty) -> NormalizedPair:
    return NormalizedPair(
        client=client,
        property=prop,
        day_gap=day_gap(client.move_in_date, prop.availability_date),
    )


def _finalize(entries: list[_RankedMatch], options: RankOptions) -> list[MatchResult]:
    entries.sort(key=_RankedMatch.sort_key)
    results = [entry.result for entry in entries]
    if options.top_n is not None:
        results = results[: options.top_n]
    return results


def rank_matches_for_client(
    client: ClientInput,
    properties: Iterable[PropertyInput],
    options: Optional[RankOptions] = None,
    weights: MatchWeights = DEFAULT_WEIGHTS,
) -> list[MatchResult]:
    """
    Rankea propiedades para un cliente.

    Args:
        client: Cliente (modelo o dict del CRM)
        properties: Propiedades candidatas
        options: Score mínimo, top N y filtros
        weights: Pesos del score compuesto

    Returns:
        Lista de MatchResult ordenada; vacía si no hay candidatos

    Raises:
        InvalidMatchInputError: si algún registro evaluado no tiene id
    """
    options = options or RankOptions()
    client = as_client(client)
    normalized_client = normalize_client(client)

    entries: list[_RankedMatch] = []
    evaluated = skipped = 0
    for candidate in properties:
        prop = as_property(candidate)
        reason = filter_reason(client, prop, options)
        if reason:
            skipped += 1
            logger.debug(
                "Par descartado por filtro",
                client_id=client.id,
                property_id=prop.id,
                reason=reason,
            )
            continue

        check_identity(client, prop)
        pair = _pair(normalized_client, normalize_property(prop))
        result = score_pair(pair, weights)
        evaluated += 1
        if result.score < options.min_score:
            continue
        entries.append(
            _RankedMatch(
                result=result,
                counterpart_id=prop.id,
                created_at=pair.property.created_at,
                day_gap=pair.day_gap,
            )
        )

    ranked = _finalize(entries, options)
    logger.info(
        "Ranking de propiedades para cliente",
        client_id=client.id,
        evaluated=evaluated,
        skipped=skipped,
        kept=len(ranked),
    )
    return ranked


def rank_matches_for_property(
    prop: PropertyInput,
    clients: Iterable[ClientInput],
    options: Optional[RankOptions] = None,
    weights: MatchWeights = DEFAULT_WEIGHTS,
) -> list[MatchResult]:
    """
    Rankea clientes para una propiedad (operación simétrica).

    El desempate por recencia usa el createdAt del cliente.
    """
    options = options or RankOptions()
    prop = as_property(prop)
    normalized_property = normalize_property(prop)

    entries: list[_RankedMatch] = []
    evaluated = skipped = 0
    for candidate in clients:
        client = as_client(candidate)
        reason = filter_reason(client, prop, options)
        if reason:
            skipped += 1
            logger.debug(
                "Par descartado por filtro",
                client_id=client.id,
                property_id=prop.id,
                reason=reason,
            )
            continue

        check_identity(client, prop)
        pair = _pair(normalize_client(client), normalized_property)
        result = score_pair(pair, weights)
        evaluated += 1
        if result.score < options.min_score:
            continue
        entries.append(
            _RankedMatch(
                result=result,
                counterpart_id=client.id,
                created_at=pair.client.created_at,
                day_gap=pair.day_gap,
            )
        )

    ranked = _finalize(entries, options)
    logger.info(
        "Ranking de clientes para propiedad",
        property_id=prop.id,
        evaluated=evaluated,
        skipped=skipped,
        kept=len(ranked),
    )
    return ranked
