"""
Extracción de preferencias a partir del feedback en texto libre.

Heurística por keywords: cada regla mapea un flag a las palabras que lo
disparan y a la lista (likes o dislikes) donde se buscan. La comparación
es por substring sin distinguir mayúsculas.
"""

import re
from collections import Counter
from dataclasses import dataclass, field
from statistics import mean
from typing import Iterable, Mapping, Optional

from showmatch.config import IMPORTANT_FEATURES
from showmatch.models import FeedbackRecord, InterestLevel, Property


@dataclass
class SizePreferences:
    """Preferencias de tamaño inferidas del feedback."""

    min_bedrooms: Optional[int] = None
    likes_spaciousness: bool = False
    dislikes_small_spaces: bool = False


@dataclass
class TypePreferences:
    """Tipos de propiedad preferidos y evitados (en minúsculas)."""

    preferred: list[str] = field(default_factory=list)
    avoided: list[str] = field(default_factory=list)


@dataclass
class HistoryPattern:
    """Patrón agregado de las propiedades que más le interesaron al cliente."""

    price_min: Optional[float] = None
    price_max: Optional[float] = None
    avg_sqft: Optional[float] = None

    def price_in_range(self, price: float) -> bool:
        if self.price_min is None or self.price_max is None:
            return False
        return self.price_min <= price <= self.price_max


def build_catalog(properties: Iterable[Property]) -> dict[str, Property]:
    """Indexa propiedades por ID (como string) para resolver el feedback."""
    return {str(p.id): p for p in properties}


def is_important_feature(feature: str) -> bool:
    """True si la feature contiene alguna del vocabulario importante."""
    text = feature.lower()
    return any(important in text for important in IMPORTANT_FEATURES)


class FeedbackPreferenceExtractor:
    """Extractor basado en tablas de keywords."""

    # flag -> (lista del feedback a escanear, keywords)
    SIZE_RULES: dict[str, tuple[str, list[str]]] = {
        "likes_spaciousness": ("likes", ["spacious", "large", "open"]),
        "dislikes_small_spaces": ("dislikes", ["small", "cramped", "tiny"]),
    }

    BEDROOM_PATTERN = re.compile(r"(\d+)\s*bed", flags=re.IGNORECASE)

    # Umbral de frecuencia relativa para considerar preferida una feature
    PREFERRED_SHARE = 0.3

    def _normalize(self, text: str) -> str:
        return (text or "").strip().lower()

    def _phrases(self, record: FeedbackRecord, source: str) -> list[str]:
        return getattr(record, source, None) or []

    def _matches_rule(self, phrase: str, keywords: list[str]) -> bool:
        text = self._normalize(phrase)
        return any(keyword in text for keyword in keywords)

    def extract_size_preferences(
        self, feedback: list[FeedbackRecord]
    ) -> SizePreferences:
        prefs = SizePreferences()

        for record in feedback:
            for flag, (source, keywords) in self.SIZE_RULES.items():
                if getattr(prefs, flag):
                    continue
                if any(self._matches_rule(p, keywords) for p in self._phrases(record, source)):
                    setattr(prefs, flag, True)

            for like in self._phrases(record, "likes"):
                match = self.BEDROOM_PATTERN.search(like)
                if match:
                    beds = int(match.group(1))
                    prefs.min_bedrooms = max(prefs.min_bedrooms or 0, beds)

        return prefs

    def _count_phrases(self, feedback: list[FeedbackRecord], source: str) -> Counter:
        counts: Counter = Counter()
        for record in feedback:
            for phrase in self._phrases(record, source):
                normalized = self._normalize(phrase)
                if normalized:
                    counts[normalized] += 1
        return counts

    def extract_preferred_features(self, feedback: list[FeedbackRecord]) -> list[str]:
        """
        Likes que se repiten más de una vez o aparecen en más del 30%
        de los registros de feedback. Conserva el orden de aparición.
        """
        if not feedback:
            return []
        counts = self._count_phrases(feedback, "likes")
        total = len(feedback)
        return [
            phrase
            for phrase, count in counts.items()
            if count > 1 or count / total > self.PREFERRED_SHARE
        ]

    def extract_disliked_features(self, feedback: list[FeedbackRecord]) -> list[str]:
        """Dislikes que se repiten más de una vez."""
        counts = self._count_phrases(feedback, "dislikes")
        return [phrase for phrase, count in counts.items() if count > 1]

    def extract_type_preferences(
        self,
        feedback: list[FeedbackRecord],
        catalog: Optional[Mapping[str, Property]] = None,
    ) -> TypePreferences:
        """
        Infiere tipos preferidos/evitados a partir de las propiedades visitadas.

        Preferido: tipo de alguna visita con interés high o very high.
        Evitado: tipo que solo aparece en visitas con interés low.
        Sin catálogo no hay forma de resolver las visitas y no se infiere nada.
        """
        prefs = TypePreferences()
        if not catalog:
            return prefs

        low_types: list[str] = []
        for record in feedback:
            prop = catalog.get(str(record.property_id))
            if prop is None:
                continue
            prop_type = self._normalize(prop.property_type)
            if not prop_type:
                continue
            if record.interest_level.is_high:
                if prop_type not in prefs.preferred:
                    prefs.preferred.append(prop_type)
            elif record.interest_level == InterestLevel.LOW:
                if prop_type not in low_types:
                    low_types.append(prop_type)

        prefs.avoided = [t for t in low_types if t not in prefs.preferred]
        return prefs

    def analyze_history_patterns(
        self,
        high_interest: list[FeedbackRecord],
        catalog: Optional[Mapping[str, Property]] = None,
    ) -> Optional[HistoryPattern]:
        """
        Agrega precio y superficie de las propiedades con alto interés.

        Devuelve None si ninguna visita se puede resolver en el catálogo.
        """
        if not catalog:
            return None

        liked = [
            catalog[str(r.property_id)]
            for r in high_interest
            if str(r.property_id) in catalog
        ]
        if not liked:
            return None

        prices = [p.price for p in liked]
        sizes = [p.sqft for p in liked if p.sqft > 0]
        return HistoryPattern(
            price_min=min(prices),
            price_max=max(prices),
            avg_sqft=mean(sizes) if sizes else None,
        )
