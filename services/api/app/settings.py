from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Unit Converter API"
    log_level: str = "INFO"

    # OpenAPI / Swagger UI
    docs_enabled: bool = True

    # Rate limiting (per-IP)
    rate_limit_enabled: bool = True
    rate_limit_default: str = "100/minute"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]


settings = Settings()
