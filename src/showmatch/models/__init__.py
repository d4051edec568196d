"""
Modelos de datos del sistema.

Entidades que el motor de matching consume:
- Client: comprador con su presupuesto
- Property: propiedad del inventario
- FeedbackRecord: opinión del cliente tras una visita
"""

from showmatch.models.client import Client, Budget
from showmatch.models.property import Property
from showmatch.models.feedback import FeedbackRecord, InterestLevel
from showmatch.models.dataset import Dataset

__all__ = [
    # Clientes
    "Client",
    "Budget",
    # Inventario
    "Property",
    # Feedback
    "FeedbackRecord",
    "InterestLevel",
    # Colecciones
    "Dataset",
]
