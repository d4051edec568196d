"""
Scoring cliente-propiedad.

El score final (0-100) es la suma de cinco componentes acotados:

    presupuesto   0-40
    tamaño        0-20
    features      0-20
    tipo          0-10
    historial     5-10

Es una función pura: no loguea, no muta sus entradas y no levanta
excepciones con datos bien formados.
"""

import math
from dataclasses import dataclass, field
from typing import Mapping, Optional

from showmatch.config import RECOMMENDATION_BANDS, WEAK_MATCH_LABEL
from showmatch.matching.preferences import FeedbackPreferenceExtractor, is_important_feature
from showmatch.models import Budget, Client, FeedbackRecord, Property

BUDGET_MAX = 40.0
SIZE_MAX = 20.0
FEATURE_MAX = 20.0
TYPE_MAX = 10.0
HISTORY_MAX = 10.0

# Neutrales cuando no hay señal en el feedback
SIZE_BASE = 10.0
FEATURE_BASE = 10.0
TYPE_BASE = 5.0
HISTORY_BASE = 5.0

# Mínimo de visitas para buscar patrones en el historial
HISTORY_MIN_FEEDBACK = 3

_extractor = FeedbackPreferenceExtractor()


@dataclass
class SubScore:
    """Resultado de un componente del score."""

    score: float
    reason: Optional[str] = None


@dataclass
class FeatureScore:
    score: float
    matches: list[str] = field(default_factory=list)
    mismatches: list[str] = field(default_factory=list)


@dataclass
class MatchResult:
    """Resultado de matching para un par cliente-propiedad."""

    score: int  # 0 a 100
    recommendation: str
    reasons: list[str] = field(default_factory=list)
    mismatches: list[str] = field(default_factory=list)
    breakdown: dict[str, float] = field(default_factory=dict)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def score_budget(budget: Budget, price: float) -> SubScore:
    """Ajuste del precio al rango de presupuesto (0-40)."""
    if budget.contains(price):
        half_range = budget.half_range
        if half_range > 0:
            percent_from_mid = abs(price - budget.midpoint) / half_range
        else:
            percent_from_mid = 0.0
        score = BUDGET_MAX - percent_from_mid * 10
        reason = "Well within budget" if price <= budget.midpoint else "Within budget range"
        return SubScore(score, reason)

    if price < budget.min:
        # Más barato que lo buscado: puede ser una oportunidad o una señal rara
        if budget.min <= 0:
            return SubScore(15.0, "Below budget - potential opportunity")
        percent_below = (budget.min - price) / budget.min
        score = max(15.0, 25 - percent_below * 50)
        if percent_below > 0.2:
            return SubScore(score, "Significantly below budget")
        return SubScore(score, "Below budget - potential opportunity")

    if budget.max <= 0:
        return SubScore(0.0, "Above budget")
    percent_above = (price - budget.max) / budget.max
    score = max(0.0, 20 - percent_above * 100)
    return SubScore(score, "Above budget" if percent_above > 0.1 else "Slightly above budget")


def score_size(feedback: list[FeedbackRecord], prop: Property) -> SubScore:
    """Ajuste de dormitorios y superficie a lo que el cliente dijo (0-20)."""
    if not feedback:
        return SubScore(SIZE_BASE)

    prefs = _extractor.extract_size_preferences(feedback)
    score = SIZE_BASE
    fragments: list[str] = []

    if prefs.min_bedrooms:
        if prop.bedrooms >= prefs.min_bedrooms:
            score += 5
            fragments.append(f"{prop.bedrooms} bedrooms meets preference")
        else:
            score -= 5
            fragments.append(f"Only {prop.bedrooms} bedrooms")

    if prefs.likes_spaciousness and prop.sqft > 2000:
        score += 5
        fragments.append("spacious layout")
    elif prefs.dislikes_small_spaces and prop.sqft < 1500:
        score -= 5
        fragments.append("may feel small")

    reason = None
    if fragments:
        reason = ", ".join(fragments)
        reason = reason[0].upper() + reason[1:]

    return SubScore(_clamp(score, 0, SIZE_MAX), reason)


def score_features(feedback: list[FeedbackRecord], prop: Property) -> FeatureScore:
    """Features preferidas presentes, importantes ausentes y rechazadas presentes (0-20)."""
    preferred = _extractor.extract_preferred_features(feedback)
    disliked = _extractor.extract_disliked_features(feedback)
    tags = prop.normalized_features

    result = FeatureScore(score=FEATURE_BASE)

    for feature in preferred:
        if any(feature in tag for tag in tags):
            result.matches.append(feature)
            result.score += 2
        elif is_important_feature(feature):
            result.mismatches.append(feature)
            result.score -= 1

    for feature in disliked:
        if any(feature in tag for tag in tags):
            result.mismatches.append(f"Has {feature}")
            result.score -= 2

    result.score = _clamp(result.score, 0, FEATURE_MAX)
    return result


def score_type(
    feedback: list[FeedbackRecord],
    prop: Property,
    catalog: Optional[Mapping[str, Property]] = None,
) -> SubScore:
    """Tipo de propiedad contra los tipos preferidos/evitados (0-10)."""
    prefs = _extractor.extract_type_preferences(feedback, catalog)
    if not prefs.preferred:
        return SubScore(TYPE_BASE)

    prop_type = (prop.property_type or "").strip().lower()
    if prop_type in prefs.preferred:
        return SubScore(TYPE_MAX, f"Preferred property type: {prop.property_type}")
    if prop_type in prefs.avoided:
        return SubScore(0.0, f"Not preferred: {prop.property_type}")
    return SubScore(TYPE_BASE)


def score_history(
    feedback: list[FeedbackRecord],
    prop: Property,
    catalog: Optional[Mapping[str, Property]] = None,
) -> SubScore:
    """Parecido con las propiedades que más le interesaron al cliente (5-10)."""
    if len(feedback) < HISTORY_MIN_FEEDBACK:
        return SubScore(HISTORY_BASE)

    high_interest = [f for f in feedback if f.interest_level.is_high]
    if not high_interest:
        return SubScore(HISTORY_BASE)

    pattern = _extractor.analyze_history_patterns(high_interest, catalog)
    if pattern is None:
        return SubScore(HISTORY_BASE)

    score = HISTORY_BASE
    reason = None
    if pattern.price_in_range(prop.price):
        score += 3
    if pattern.avg_sqft is not None and abs(prop.sqft - pattern.avg_sqft) < 500:
        score += 2
        reason = "Similar to properties client liked"

    return SubScore(_clamp(score, HISTORY_BASE, HISTORY_MAX), reason)


def get_recommendation(score: float) -> str:
    """Etiqueta cualitativa según el score total."""
    for threshold, label in RECOMMENDATION_BANDS:
        if score >= threshold:
            return label
    return WEAK_MATCH_LABEL


def score_match(
    client: Client,
    prop: Property,
    feedback: Optional[list[FeedbackRecord]] = None,
    catalog: Optional[Mapping[str, Property]] = None,
) -> MatchResult:
    """
    Calcula el match entre un cliente y una propiedad.

    Args:
        client: Cliente comprador
        prop: Propiedad candidata
        feedback: Historial de feedback de ESE cliente
        catalog: Propiedades indexadas por ID (string) para resolver las
            visitas del historial. Sin catálogo, tipo e historial quedan neutrales.

    Returns:
        MatchResult con score entero 0-100, etiqueta, razones y desglose
    """
    feedback = list(feedback or [])
    reasons: list[str] = []
    mismatches: list[str] = []

    budget = score_budget(client.budget, prop.price)
    if budget.score > 30:
        reasons.append(budget.reason)
    elif budget.score < 20:
        mismatches.append(budget.reason)

    size = score_size(feedback, prop)
    if size.reason:
        if size.score > 15:
            reasons.append(size.reason)
        elif size.score < 10:
            mismatches.append(size.reason)

    features = score_features(feedback, prop)
    if features.matches:
        reasons.append(f"Has preferred features: {', '.join(features.matches)}")
    if features.mismatches:
        mismatches.append(f"Missing: {', '.join(features.mismatches)}")

    prop_type = score_type(feedback, prop, catalog)
    if prop_type.reason:
        if prop_type.score > TYPE_BASE:
            reasons.append(prop_type.reason)
        elif prop_type.score < TYPE_BASE:
            mismatches.append(prop_type.reason)

    history = score_history(feedback, prop, catalog)
    if history.reason and history.score > HISTORY_BASE:
        reasons.append(history.reason)

    breakdown = {
        "budget": budget.score,
        "size": size.score,
        "features": features.score,
        "type": prop_type.score,
        "history": history.score,
    }
    total = sum(breakdown.values())
    if not math.isfinite(total):
        total = 0.0
    score = _round_half_up(_clamp(total, 0, 100))

    return MatchResult(
        score=score,
        recommendation=get_recommendation(score),
        reasons=reasons,
        mismatches=mismatches,
        breakdown=breakdown,
    )
