"""
Configuración centralizada del sistema.
Carga variables de entorno y define settings globales.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Encontrar la raíz del proyecto (donde está el .env)
# config.py -> showmatch/ -> src/ -> project root
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Configuración principal de la aplicación."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Matching
    default_match_limit: int = Field(
        5, ge=1, description="Cantidad de resultados por defecto en los rankings"
    )
    interested_min_score: int = Field(
        50,
        ge=0,
        le=100,
        description="Score mínimo para sugerir un cliente interesado en una propiedad",
    )

    # Logging
    log_level: str = Field("INFO", description="Nivel de logging")


@lru_cache
def get_settings() -> Settings:
    """Obtiene la configuración cacheada."""
    return Settings()


# Constantes del sistema
INTEREST_LEVELS = ["low", "medium", "high", "very high"]

HIGH_INTEREST_LEVELS = ["high", "very high"]

# Features cuya ausencia penaliza cuando el cliente las prefiere
IMPORTANT_FEATURES = [
    "garage",
    "parking",
    "yard",
    "pool",
    "office",
    "updated kitchen",
    "master suite",
    "storage",
]

# (score mínimo, etiqueta), de mayor a menor
RECOMMENDATION_BANDS = [
    (85, "Excellent Match"),
    (70, "Strong Match"),
    (55, "Good Match"),
    (40, "Potential Match"),
]

WEAK_MATCH_LABEL = "Weak Match"

CONTACT_METHODS = ["email", "phone", "text"]
