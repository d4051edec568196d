"""
Dataset en memoria

Agrupa clientes, propiedades y feedback tal como los exporta la
aplicación (JSON con claves camelCase).
"""

import json
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field

from showmatch.models.client import Client
from showmatch.models.feedback import FeedbackRecord
from showmatch.models.property import Property


class Dataset(BaseModel):
    """Colecciones de entrada para el motor de matching."""

    clients: list[Client] = Field(default_factory=list)
    properties: list[Property] = Field(default_factory=list)
    feedback: list[FeedbackRecord] = Field(default_factory=list)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "Dataset":
        """
        Carga un dataset desde un archivo JSON.

        Errores de lectura, de JSON o de validación se propagan al caller.
        """
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate(json.loads(raw))

    def get_client(self, client_id: Union[int, str]) -> Optional[Client]:
        """Busca un cliente por ID (comparando como string)."""
        for client in self.clients:
            if str(client.id) == str(client_id):
                return client
        return None

    def get_property(self, property_id: Union[int, str]) -> Optional[Property]:
        """Busca una propiedad por ID (comparando como string)."""
        for prop in self.properties:
            if str(prop.id) == str(property_id):
                return prop
        return None

    def feedback_for(self, client_id: Union[int, str]) -> list[FeedbackRecord]:
        """Feedback de un cliente, en el orden original."""
        return [f for f in self.feedback if str(f.client_id) == str(client_id)]
