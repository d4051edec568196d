"""
Motor de matching.

Combina presupuesto, tamaño, features, tipo e historial de visitas
para sugerir propiedades a clientes y clientes a propiedades.
"""

from showmatch.matching.engine import MatchingEngine, PropertyMatch, ClientMatch
from showmatch.matching.scorer import MatchResult, score_match, get_recommendation
from showmatch.matching.preferences import FeedbackPreferenceExtractor, build_catalog

__all__ = [
    "MatchingEngine",
    "PropertyMatch",
    "ClientMatch",
    "MatchResult",
    "score_match",
    "get_recommendation",
    "FeedbackPreferenceExtractor",
    "build_catalog",
]
