# invoicing/core/config.py
"""
Runtime configuration loaded from environment variables (and a local .env file).
"""

import logging
import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

INSECURE_JWT_SECRET = "your-secret-key-change-in-production"
DEFAULT_DATABASE_URL = "sqlite:///db.sqlite"  # file in project root
SEVEN_DAYS = 7 * 24 * 60 * 60


def env_int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= minimum else default


def env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    jwt_secret: str = INSECURE_JWT_SECRET
    database_url: str = DEFAULT_DATABASE_URL
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    token_ttl_seconds: int = SEVEN_DAYS
    bcrypt_rounds: int = 10
    allowed_origins: List[str] = field(default_factory=lambda: ["*"])

    @property
    def uses_insecure_secret(self) -> bool:
        return self.jwt_secret == INSECURE_JWT_SECRET

    @classmethod
    def from_env(cls) -> "Settings":
        url = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)
        if url == "":
            raise ValueError(
                "DATABASE_URL is set but empty. "
                "Either unset it to use the default SQLite file, or provide a valid database URL."
            )
        return cls(
            jwt_secret=os.getenv("JWT_SECRET") or INSECURE_JWT_SECRET,
            database_url=url,
            host=os.getenv("HOST", "0.0.0.0"),
            port=env_int("PORT", 3000),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            token_ttl_seconds=env_int("ACCESS_TOKEN_EXPIRES", SEVEN_DAYS),
            # bcrypt refuses cost factors below 4
            bcrypt_rounds=env_int("BCRYPT_ROUNDS", 10, minimum=4),
            allowed_origins=env_list("ALLOWED_ORIGINS", ["*"]),
        )


settings = Settings.from_env()
