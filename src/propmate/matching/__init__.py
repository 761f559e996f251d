"""
Motor de matching.

Puntúa pares cliente ↔ propiedad con seis criterios ponderados,
explica el resultado con razones legibles y rankea candidatos.
"""

from propmate.matching.engine import MatchingEngine
from propmate.matching.ranker import (
    RankOptions,
    rank_matches_for_client,
    rank_matches_for_property,
)
from propmate.matching.scoring import score_match
from propmate.matching.weights import DEFAULT_WEIGHTS, MatchWeights, weights_from_settings

__all__ = [
    "MatchingEngine",
    "MatchWeights",
    "DEFAULT_WEIGHTS",
    "RankOptions",
    "score_match",
    "rank_matches_for_client",
    "rank_matches_for_property",
    "weights_from_settings",
]
