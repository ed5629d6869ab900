from functools import lru_cache

from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    # App
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    debug: bool = False
    cors_origins: list[str] = ["*"]

    ENVIRONMENT: str = "Production"

    # Database
    # A full URL wins over the discrete SQL Server settings below.
    database_url: str = ""
    db_server: str = ""
    db_user: str = ""
    db_password: str = ""
    db_name: str = "protests"
    db_encrypt: bool = True
    db_trust_server_certificate: bool = False
    db_driver: str = "ODBC Driver 18 for SQL Server"
    sqlite_path: str = "./protests.db"
    LOG_DB: bool = False

    # Map
    map_center_lat: float = 39.9208
    map_center_lng: float = 32.8541
    map_zoom: int = 6
    map_tile_url: str = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"

    SENTRY_DSN: str = ""
    SENTRY_TRACES_SAMPLE_RATE: float = 0.0
    SENTRY_PROFILES_SAMPLE_RATE: float = 0.0

    RUN_MIGRATIONS_ON_STARTUP: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def DB_DSN(self) -> str:
        if self.database_url:
            return self.database_url
        if not self.db_server:
            return f"sqlite+aiosqlite:///{self.sqlite_path}"
        return URL.create(
            "mssql+aioodbc",
            username=self.db_user or None,
            password=self.db_password or None,
            host=self.db_server,
            database=self.db_name,
            query={
                "driver": self.db_driver,
                "Encrypt": "yes" if self.db_encrypt else "no",
                "TrustServerCertificate": "yes" if self.db_trust_server_certificate else "no",
            },
        ).render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
