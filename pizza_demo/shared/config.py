"""
Shared configuration — environment variables read once into a Settings model.

  APP_ENV                  development | production
  REST_PORT / HATEOAS_PORT listening ports (3000 / 3001)
  LOG_LEVEL                logging level name
  *_DELAY_SECONDS          status progression delays, measured from creation
"""

import os

from pydantic import BaseModel

# CORS allow-list for the static front-ends (local dev servers + hosted pages)
CORS_ALLOW_ORIGINS = [
    "http://localhost:5500",
    "http://localhost:8080",
    "http://localhost:3000",
    "http://127.0.0.1:5500",
    "http://127.0.0.1:8080",
    "https://demo-hypermedia.netlify.app",
]
CORS_ALLOW_ORIGIN_REGEX = r"https?://.*\.(github\.io|netlify\.app)$"


class Settings(BaseModel):
    app_env: str = "development"
    rest_port: int = 3000
    hateoas_port: int = 3001
    log_level: str = "INFO"
    preparing_delay: float = 10.0
    baking_delay: float = 20.0
    ready_delay: float = 30.0

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            app_env=os.environ.get("APP_ENV", "development").lower(),
            rest_port=int(os.environ.get("REST_PORT", "3000")),
            hateoas_port=int(os.environ.get("HATEOAS_PORT", "3001")),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
            preparing_delay=float(os.environ.get("PREPARING_DELAY_SECONDS", "10")),
            baking_delay=float(os.environ.get("BAKING_DELAY_SECONDS", "20")),
            ready_delay=float(os.environ.get("READY_DELAY_SECONDS", "30")),
        )
