# campus_energy/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
import json
import logging
from typing import Optional
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[2]  # project root
ENV_PATH = BASE_DIR / ".env"

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        extra="ignore",
    )

    DEBUG: bool = Field(default=False)
    ENVIRONMENT: str = Field(default="production")

    # Conversion factors (currency units per kWh, kg CO2 per kWh)
    TARIFF_RATE: float = Field(default=0.22, ge=0)
    EMISSION_FACTOR: float = Field(default=0.4, ge=0)
    CURRENCY: str = Field(default="PEN")

    # Demo data / simulator
    SEED_DEMO_DATA: bool = Field(default=True)
    DEFAULT_SCENARIO: str = Field(default="Apagado inteligente")

    # Frontend / CORS
    FRONTEND_URL: Optional[str] = None
    CORS_ORIGINS: Optional[str] = None

    def get_cors_origins(self) -> list[str]:
        if not self.CORS_ORIGINS:
            return []
        raw = (self.CORS_ORIGINS or "").strip()
        if not raw:
            return []
        if raw.startswith("["):
            try:
                items = json.loads(raw)
            except json.JSONDecodeError as e:
                logger.warning(f"CORS_ORIGINS is not valid JSON: {e}")
                return []
            return [str(x).strip().rstrip("/") for x in items if str(x).strip()]
        return [x.strip().rstrip("/") for x in raw.split(",") if x.strip()]


settings = Settings()

logger.debug(f"Loaded env from: {ENV_PATH}")
logger.debug(f"DEBUG={settings.DEBUG} ENVIRONMENT={settings.ENVIRONMENT}")
