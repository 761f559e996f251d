"""
Motor de matching entre clientes y propiedades.

Fachada que fija pesos y opciones de ranking para las pantallas del
CRM (auto-match desde la ficha del cliente, matching por propiedad).
"""

from typing import Iterable, Optional

from propmate.config import Settings, get_settings
from propmate.models import MatchResult

from .ranker import RankOptions, rank_matches_for_client, rank_matches_for_property
from .scoring import ClientInput, PropertyInput, score_match
from .weights import DEFAULT_WEIGHTS, MatchWeights, weights_from_settings


class MatchingEngine:
    """
    Motor de matching con pesos y opciones fijados.

    Flujo por consulta:
    1. Normalizar cada par cliente/propiedad
    2. Correr los seis criterios
    3. Componer el score con los pesos
    4. Generar razones
    5. Filtrar, ordenar y truncar

    No guarda estado entre llamadas: dos consultas iguales recalculan
    todo y devuelven lo mismo.
    """

    def __init__(
        self,
        weights: Optional[MatchWeights] = None,
        options: Optional[RankOptions] = None,
    ):
        self.weights = weights or DEFAULT_WEIGHTS
        self.options = options or RankOptions()

    @classmethod
    def from_settings(
        cls, settings: Optional[Settings] = None, **option_overrides
    ) -> "MatchingEngine":
        """Construye el motor con pesos y opciones tomados de la configuración."""
        settings = settings or get_settings()
        return cls(
            weights=weights_from_settings(settings),
            options=RankOptions.from_settings(settings, **option_overrides),
        )

    def score(self, client: ClientInput, prop: PropertyInput) -> MatchResult:
        return score_match(client, prop, self.weights)

    def rank_for_client(
        self, client: ClientInput, properties: Iterable[PropertyInput]
    ) -> list[MatchResult]:
        return rank_matches_for_client(client, properties, self.options, self.weights)

    def rank_for_property(
        self, prop: PropertyInput, clients: Iterable[ClientInput]
    ) -> list[MatchResult]:
        return rank_matches_for_property(prop, clients, self.options, self.weights)
