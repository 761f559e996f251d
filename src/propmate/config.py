"""
Configuración centralizada del sistema.
Carga variables de entorno y define settings globales.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Encontrar la raíz del proyecto (donde está el .env)
# config.py -> propmate/ -> src/ -> project root
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

    # Logging
    log_level: str = Field("INFO", description="Nivel de logging")

    # Ranking
    match_min_score: int = Field(
        20, ge=0, le=100, description="Score mínimo para mostrar un match"
    )
    match_top_n: Optional[int] = Field(
        None, ge=1, description="Cantidad máxima de matches por consulta"
    )

    # Pesos del score compuesto. No se renormalizan: el score final se recorta a 0-100
    weight_budget: float = Field(0.30, ge=0.0, le=1.0)
    weight_location: float = Field(0.25, ge=0.0, le=1.0)
    weight_bhk: float = Field(0.15, ge=0.0, le=1.0)
    weight_furnishing: float = Field(0.10, ge=0.0, le=1.0)
    weight_lifestyle: float = Field(0.10, ge=0.0, le=1.0)
    weight_availability: float = Field(0.10, ge=0.0, le=1.0)


@lru_cache
def get_settings() -> Settings:
    """Obtiene la configuración cacheada."""
    return Settings()


# Constantes del sistema

# Umbrales de las razones: >= positivo, < advertencia
POSITIVE_REASON_THRESHOLD = 80.0
CAUTION_REASON_THRESHOLD = 40.0

# Timing de disponibilidad (días)
AVAILABILITY_GRACE_DAYS = 7
AVAILABILITY_ZERO_DAYS = 90

# Lifestyle
BACHELOR_PENALTY = 40.0
LARGE_FAMILY_PARKING_PENALTY = 20.0
LARGE_FAMILY_SIZE = 4

# Puntaje por distancia en la escala de BHK (0, 1, 2 pasos)
BHK_STEP_SCORES = (100.0, 60.0, 20.0)

# Penalización por cada nivel de diferencia en amoblamiento
FURNISHING_STEP_PENALTY = 40.0

# Ubicación
SAME_CITY_OTHER_AREA_SCORE = 50.0
