"""
Modelo de Cliente

Comprador con su rango de presupuesto y datos de contacto.
"""

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from showmatch.config import CONTACT_METHODS


class Budget(BaseModel):
    """Rango de presupuesto del cliente (inclusive en ambos extremos)."""

    min: float = Field(..., ge=0, description="Presupuesto mínimo")
    max: float = Field(..., ge=0, description="Presupuesto máximo")

    @model_validator(mode="after")
    def _check_range(self) -> "Budget":
        if self.min > self.max:
            raise ValueError(
                f"budget.min ({self.min}) no puede ser mayor que budget.max ({self.max})"
            )
        return self

    @property
    def midpoint(self) -> float:
        return (self.min + self.max) / 2

    @property
    def half_range(self) -> float:
        return (self.max - self.min) / 2

    def contains(self, price: float) -> bool:
        return self.min <= price <= self.max


class Client(BaseModel):
    """
    Cliente comprador.

    Es inmutable desde el punto de vista del motor de matching:
    el registro de clientes del caller es su dueño.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    # Identificadores
    id: Union[int, str] = Field(..., description="ID único del cliente")
    name: str = Field(..., description="Nombre a mostrar")

    # Contacto
    email: Optional[str] = Field(None, description="Email de contacto")
    phone: Optional[str] = Field(None, description="Teléfono de contacto")
    preferred_contact_method: Optional[str] = Field(
        None,
        alias="preferredContactMethod",
        description="Canal preferido: email, phone o text",
    )

    # Presupuesto
    budget: Budget = Field(..., description="Rango de presupuesto")

    # Metadatos
    date_added: Optional[datetime] = Field(
        None, alias="dateAdded", description="Fecha de alta"
    )

    @field_validator("preferred_contact_method")
    @classmethod
    def _check_contact_method(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        normalized = value.strip().lower()
        if normalized not in CONTACT_METHODS:
            raise ValueError(
                f"Canal de contacto inválido: {value!r} (opciones: {', '.join(CONTACT_METHODS)})"
            )
        return normalized
