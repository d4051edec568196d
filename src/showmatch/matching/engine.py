"""
Motor de matching entre clientes y propiedades.

Implementa:
- Top de propiedades para un cliente
- Clientes interesados en una propiedad (solo leads razonables)

Ambas direcciones aplican el mismo scorer una vez por candidato y
ordenan de forma estable: ante empate se respeta el orden de entrada.
"""

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence

import structlog

from showmatch.config import Settings, get_settings
from showmatch.matching.preferences import build_catalog
from showmatch.matching.scorer import MatchResult, score_match
from showmatch.models import Client, FeedbackRecord, Property

logger = structlog.get_logger()


@dataclass
class PropertyMatch:
    """Propiedad sugerida para un cliente."""

    property: Property
    match: MatchResult


@dataclass
class ClientMatch:
    """Cliente sugerido para una propiedad."""

    client: Client
    match: MatchResult


class MatchingEngine:
    """
    Ranker sobre el scorer cliente-propiedad.

    Flujo:
    1. Filtrar el feedback del cliente
    2. Calcular el score de cada candidato
    3. Ordenar por score descendente (estable)
    4. Filtrar y truncar al límite
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def score(
        self,
        client: Client,
        prop: Property,
        feedback: Sequence[FeedbackRecord],
        catalog: Optional[Mapping[str, Property]] = None,
    ) -> MatchResult:
        """Score de un par; feedback debe ser el historial de ese cliente."""
        return score_match(client, prop, list(feedback), catalog)

    def _client_feedback(
        self, client: Client, feedback: Iterable[FeedbackRecord]
    ) -> list[FeedbackRecord]:
        return [f for f in feedback if str(f.client_id) == str(client.id)]

    def top_matches_for_client(
        self,
        client: Client,
        properties: Sequence[Property],
        feedback: Sequence[FeedbackRecord],
        limit: Optional[int] = None,
        min_score: Optional[int] = None,
    ) -> list[PropertyMatch]:
        """
        Encuentra las propiedades que mejor matchean con un cliente.

        Args:
            client: Cliente comprador
            properties: Propiedades candidatas (también resuelven el historial)
            feedback: Feedback de todos los clientes; se filtra el de este
            limit: Máximo de resultados (default: settings.default_match_limit)
            min_score: Filtro opcional de score mínimo (por defecto no se filtra)

        Returns:
            Lista de PropertyMatch ordenada por score
        """
        limit = self.settings.default_match_limit if limit is None else limit
        client_feedback = self._client_feedback(client, feedback)
        catalog = build_catalog(properties)

        matches = [
            PropertyMatch(prop, score_match(client, prop, client_feedback, catalog))
            for prop in properties
        ]
        matches.sort(key=lambda m: m.match.score, reverse=True)

        if min_score is not None:
            matches = [m for m in matches if m.match.score >= min_score]

        logger.debug(
            "Matches de propiedades calculados",
            client_id=client.id,
            feedback=len(client_feedback),
            candidates=len(properties),
            returned=min(len(matches), max(limit, 0)),
        )

        return matches[:max(limit, 0)]

    def interested_clients_for_property(
        self,
        prop: Property,
        clients: Sequence[Client],
        feedback: Sequence[FeedbackRecord],
        limit: Optional[int] = None,
        catalog: Optional[Iterable[Property]] = None,
    ) -> list[ClientMatch]:
        """
        Encuentra clientes que podrían estar interesados en una propiedad.

        A diferencia del top por cliente, acá se descartan los leads débiles
        (score menor a settings.interested_min_score).

        Args:
            prop: Propiedad a ofrecer
            clients: Clientes candidatos
            feedback: Feedback de todos los clientes
            limit: Máximo de resultados (default: settings.default_match_limit)
            catalog: Propiedades para resolver el historial de visitas (opcional)

        Returns:
            Lista de ClientMatch ordenada por score
        """
        limit = self.settings.default_match_limit if limit is None else limit
        floor = self.settings.interested_min_score
        property_catalog = build_catalog(catalog) if catalog is not None else None

        matches = []
        for client in clients:
            client_feedback = self._client_feedback(client, feedback)
            result = score_match(client, prop, client_feedback, property_catalog)
            if result.score >= floor:
                matches.append(ClientMatch(client, result))

        matches.sort(key=lambda m: m.match.score, reverse=True)

        logger.debug(
            "Clientes interesados calculados",
            property_id=prop.id,
            candidates=len(clients),
            above_threshold=len(matches),
        )

        return matches[:max(limit, 0)]
