from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "products.json"


class Settings(BaseSettings):
    # --- Service ---
    PROJECT_NAME: str = "Ecommerce Order Intake"
    SERVICE_NAME: str = "ecommerce"
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # development | production
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # --- Downstream order-management system ---
    OMS_URL: str = "http://localhost:4000"
    OMS_TIMEOUT_SECONDS: float = 3.0

    # --- Catalog / Orders ---
    CATALOG_PATH: Path = DEFAULT_CATALOG_PATH
    CURRENCY: str = "USD"

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore"  # other services share the same .env
    )

    @field_validator("OMS_URL")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"


settings = Settings()
