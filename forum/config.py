from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import model_validator

BASE_DIR = Path(__file__).resolve().parent.parent
PACKAGE_DIR = Path(__file__).resolve().parent
ENV_PATH = BASE_DIR / ".env"


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./forum.db"
    ECHO_SQL: bool = False
    DEBUG_LOGS: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    TEMPLATES_DIR: Optional[str] = None
    SESSION_COOKIE_NAME: str = "user"
    GUEST_IDENTITY: str = "guest"

    @model_validator(mode="after")
    def fill_templates_dir(self):
        if not self.TEMPLATES_DIR:
            self.TEMPLATES_DIR = str(PACKAGE_DIR / "templates")
        return self

    model_config = SettingsConfigDict(
        env_file=ENV_PATH,
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
