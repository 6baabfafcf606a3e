from pydantic_settings import BaseSettings
from typing import List, Union
from functools import lru_cache
import json


class Settings(BaseSettings):
    # Database Configuration
    DATABASE_URL: str = "sqlite:///./resume.db"

    # JWT Configuration
    JWT_SECRET: str = "development_secret_key"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Server Configuration
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # CORS Configuration
    CORS_ORIGINS: Union[str, List[str]] = "http://localhost:5173,https://jb-resume-generator.vercel.app"

    # PDF rendering
    RENDER_TIMEOUT_SECONDS: float = 30.0
    PAGE_SIZE: str = "A4"

    @property
    def cors_origins_list(self) -> List[str]:
        if isinstance(self.CORS_ORIGINS, list):
            return self.CORS_ORIGINS
        s = self.CORS_ORIGINS.strip()
        if s.startswith("["):
            try:
                return json.loads(s)
            except ValueError:
                pass
        return [o.strip() for o in s.split(",") if o.strip()]

    class Config:
        env_file = ".env"


class LogConfig(dict):
    def __init__(self, level: str = "INFO"):
        super().__init__(
            version=1,
            disable_existing_loggers=False,
            formatters={
                "default": {
                    "format": "[%(asctime)s] %(levelname)s in %(module)s: %(message)s",
                }
            },
            handlers={
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                }
            },
            loggers={
                "resume_service": {
                    "level": level,
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
            root={
                "level": "WARNING",
                "handlers": ["console"],
            },
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
