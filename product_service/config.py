from functools import lru_cache
from typing import Optional
from urllib.parse import quote_plus

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = ""
    db_name: str = "postgres"
    database_url: Optional[str] = None

    # Pool
    db_pool_size: int = 10
    db_pool_idle_seconds: int = 30

    # HTTP
    host: str = "0.0.0.0"
    port: int = 80
    static_dir: str = "public"

    # Application
    log_level: str = "INFO"
    api_title: str = "Product Inventory API"
    api_version: str = "1.0.0"

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

    @property
    def database_url_resolved(self) -> str:
        """
        Return DATABASE_URL when set, otherwise build an asyncpg URL from DB_*.
        A plain postgresql:// URL is converted to the asyncpg dialect.
        """
        if self.database_url and self.database_url.strip():
            url = self.database_url.strip()
            if url.startswith("postgresql://"):
                url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
            return url

        user = quote_plus(self.db_user)
        password = quote_plus(self.db_password)
        return f"postgresql+asyncpg://{user}:{password}@{self.db_host}:{self.db_port}/{self.db_name}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
