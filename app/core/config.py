from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings

from dotenv import load_dotenv

load_dotenv()  # load .env file

KV_BACKENDS = ("memory", "supabase", "none")


class Settings(BaseSettings):
    SERVICE_NAME: str = "EduWonderLab API"

    # Key-value storage: "memory", "supabase" or "none"
    KV_BACKEND: str = "memory"
    SUPABASE_URL: Optional[str] = None
    SUPABASE_SERVICE_KEY: Optional[str] = None
    SUPABASE_KV_TABLE: str = "kv_store"

    STATIC_DIR: Optional[str] = "public"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

    @field_validator("KV_BACKEND", mode="before")
    @classmethod
    def normalize_backend(cls, v):
        value = (v or "none").strip().lower()
        if value not in KV_BACKENDS:
            raise ValueError(f"KV_BACKEND must be one of {', '.join(KV_BACKENDS)}")
        return value


settings = Settings()
