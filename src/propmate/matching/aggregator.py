"""Agregador: combina los subscores en el score compuesto."""

import math

from propmate.models import ScoreBreakdown

from .criteria import CRITERIA, clamp_score
from .normalizer import NormalizedPair
from .weights import MatchWeights

# Decimales con los que se guardan los subscores en el desglose
SUBSCORE_DECIMALS = 2


def build_breakdown(pair: NormalizedPair) -> ScoreBreakdown:
    """Corre los seis criterios sobre el par normalizado."""
    return ScoreBreakdown(
        **{
            name: round(clamp_score(scorer(pair)), SUBSCORE_DECIMALS)
            for name, scorer in CRITERIA.items()
        }
    )


def weighted_sum(breakdown: ScoreBreakdown, weights: MatchWeights) -> float:
    return sum(
        getattr(weights, name) * getattr(breakdown, name) for name in CRITERIA
    )


def composite_score(breakdown: ScoreBreakdown, weights: MatchWeights) -> int:
    """
    Suma ponderada redondeada al entero más cercano (.5 hacia arriba)
    y acotada a [0, 100]. Los pesos no se renormalizan.
    """
    # Recortar ruido de punto flotante antes de redondear
    raw = round(weighted_sum(breakdown, weights), 6)
    return int(clamp_score(math.floor(raw + 0.5)))
