# backend/config.py
from pydantic_settings import BaseSettings
from typing import ClassVar
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    APP_NAME: str = "Users Service API"

    # Every account must live under the organization's mail domain
    EMAIL_DOMAIN: str = "insightflow.cl"
    MIN_AGE: int = 18

    DEFAULT_PAGE_SIZE: int = 10

    # bcrypt work factor; tests lower it to keep seeding fast
    BCRYPT_ROUNDS: int = 12

    # Load the three bootstrap accounts when the store is created
    SEED_FIXTURES: bool = True

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file: ClassVar[str] = str(env_path)
        extra: ClassVar[str] = "ignore"

settings = Settings()
