from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite:///./gestion_academica.db"

    # JWT
    secret_key: str = "cambiar-en-produccion"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 30

    # Environment
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # CORS
    allowed_origins: List[str] = ["*"]

    # Seed
    seed_on_startup: bool = False

    @property
    def database_url_sync(self) -> str:
        """Convertir URL de driver asíncrono a driver síncrono"""
        if self.database_url.startswith("postgresql+asyncpg://"):
            return self.database_url.replace(
                "postgresql+asyncpg://", "postgresql+psycopg2://"
            )
        elif self.database_url.startswith("postgresql://"):
            return self.database_url.replace("postgresql://", "postgresql+psycopg2://")
        elif self.database_url.startswith("sqlite+aiosqlite://"):
            return self.database_url.replace("sqlite+aiosqlite://", "sqlite://")
        else:
            return self.database_url

    @property
    def is_sqlite(self) -> bool:
        return self.database_url_sync.startswith("sqlite")


settings = Settings()
