# backend/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional
from pathlib import Path

BACKEND_DIR = Path(__file__).resolve().parent

# Resolve absolute path to the .env file for reliable loading
env_path = BACKEND_DIR.parent / ".env"

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./catalog.db"

    # Image Store root and front-end documents (shop.html, adminpanel/)
    UPLOAD_DIR: Path = BACKEND_DIR / "static" / "uploads"
    FRONTEND_DIR: Path = BACKEND_DIR / "frontend"

    HOST: str = "127.0.0.1"
    PORT: int = 3000

    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[Path] = None

    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(env_file=str(env_path), extra="ignore")

    @property
    def database_url(self) -> str:
        # SQLAlchemy requires postgresql:// (Heroku/Azure hand out postgres://)
        url = self.DATABASE_URL
        if url.startswith("postgres://"):
            url = url.replace("postgres://", "postgresql://", 1)
        return url

settings = Settings()
