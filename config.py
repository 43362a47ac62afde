import os
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Settings:
    app_name: str = "Complaint Portal API"
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    log_format: str = "standard"  # or "json"
    seed_users: bool = True


def get_settings() -> Settings:
    """Read settings from the environment."""
    origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
    return Settings(
        app_name=os.getenv("APP_NAME", "Complaint Portal API"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", 8000)),
        cors_origins=origins or ["*"],
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_format=os.getenv("LOG_FORMAT", "standard").lower(),
        seed_users=os.getenv("SEED_USERS", "true").lower() in ("1", "true", "yes"),
    )
