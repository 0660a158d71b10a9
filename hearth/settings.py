from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    redis_url: str = "redis://localhost:6379/0"
    log_level: str = "INFO"

    # App-wide backstop (slowapi)
    default_rate_limit: str = "100/minute"

    # Recipe extraction guard: 30 requests / 15 minutes per caller
    extract_rate_limit_max: int = 30
    extract_rate_limit_window_ms: int = 15 * 60 * 1000

    # Outbound fetch
    fetch_timeout_sec: float = 15.0
    fetch_max_bytes: int = 5 * 1024 * 1024
    fetch_user_agent: str = "Hearth/1.0 (Recipe Extractor)"

    # Extraction result cache (Redis)
    extract_cache_enabled: bool = True
    extract_cache_ttl_sec: int = 60 * 60

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://0.0.0.0:3000",
        "http://localhost",
        "http://127.0.0.1",
    ]


settings = Settings()
