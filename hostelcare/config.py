from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings - all configurable via HOSTELCARE_* environment variables"""

    model_config = SettingsConfigDict(env_prefix="HOSTELCARE_", env_file=".env", extra="ignore")

    app_name: str = "HostelCare Backend"
    database_url: str = "sqlite:///./hostelcare.db"

    # ----- Auth / JWT -----
    jwt_secret: str = "CHANGE_THIS_SECRET_IN_REAL_PROJECT"
    jwt_algorithm: str = "HS256"
    token_expire_days: int = 7
    bcrypt_rounds: int = 10

    # ----- HTTP -----
    rate_limit: str = "100/minute"
    rate_limit_enabled: bool = True
    cors_origins: str = "*"

    log_level: str = "INFO"

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    return Settings()
