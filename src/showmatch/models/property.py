"""
Modelo de Propiedad

Propiedad del inventario que se le muestra a los clientes.
"""

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Property(BaseModel):
    """Propiedad en venta tal como la entrega el registro de propiedades."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    # Identificación
    id: Union[int, str] = Field(..., description="ID único de la propiedad")
    address: str = Field(..., description="Dirección completa")

    # Datos económicos
    price: float = Field(..., ge=0, description="Precio de lista")

    # Características físicas
    bedrooms: int = Field(0, ge=0, description="Cantidad de dormitorios")
    bathrooms: float = Field(0, ge=0, description="Cantidad de baños (admite 2.5)")
    sqft: float = Field(0, ge=0, description="Superficie en pies cuadrados")
    property_type: str = Field(
        "", alias="propertyType", description="Tipo: Condo, Single Family, Townhouse..."
    )
    features: list[str] = Field(
        default_factory=list,
        description="Tags libres: ['Attached garage', 'Pool', 'Updated kitchen']",
    )

    # Atributos opcionales
    year_built: Optional[int] = Field(None, alias="yearBuilt", description="Año de construcción")
    listing_date: Optional[datetime] = Field(
        None, alias="listingDate", description="Fecha de publicación"
    )
    status: str = Field("active", description="Estado del listing")

    @property
    def normalized_features(self) -> list[str]:
        """Features en minúsculas para comparar por substring."""
        return [f.strip().lower() for f in self.features if f]
