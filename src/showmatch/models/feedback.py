"""
Modelo de Feedback de visitas

Registro histórico (append-only) de lo que el cliente opinó
de una propiedad después de visitarla.
"""

from datetime import datetime
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from showmatch.config import HIGH_INTEREST_LEVELS, INTEREST_LEVELS


class InterestLevel(str, Enum):
    """Nivel de interés declarado tras la visita (ordenado de menor a mayor)."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very high"

    @property
    def rank(self) -> int:
        return INTEREST_LEVELS.index(self.value)

    @property
    def is_high(self) -> bool:
        return self.value in HIGH_INTEREST_LEVELS


class FeedbackRecord(BaseModel):
    """
    Feedback de un cliente sobre una visita.

    client_id y property_id son referencias débiles: el motor no valida
    que existan, solo consume el subconjunto de feedback que recibe.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: Union[int, str] = Field(..., description="ID del registro")
    client_id: Union[int, str] = Field(..., alias="clientId", description="FK al Client")
    property_id: Union[int, str] = Field(
        ..., alias="propertyId", description="FK a la Property visitada"
    )

    # Texto libre
    likes: list[str] = Field(default_factory=list, description="Lo que le gustó")
    dislikes: list[str] = Field(default_factory=list, description="Lo que no le gustó")

    interest_level: InterestLevel = Field(
        ..., alias="interestedLevel", description="Nivel de interés"
    )
    timestamp: Optional[datetime] = Field(None, description="Momento de la visita")

    # Datos complementarios que el motor no usa
    overall_rating: Optional[int] = Field(
        None, ge=1, le=5, alias="overallRating", description="Rating general 1-5"
    )
    price_opinion: Optional[str] = Field(
        None, alias="priceOpinion", description="fair, slightly high, too high..."
    )
    realtor_notes: Optional[str] = Field(
        None, alias="realtorNotes", description="Notas del agente"
    )
    showing_duration: Optional[int] = Field(
        None, ge=0, alias="showingDuration", description="Duración de la visita en minutos"
    )
