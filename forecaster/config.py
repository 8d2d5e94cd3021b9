from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Database (embedded SQLite by default)
    database_url: str = "sqlite+aiosqlite:///./scenarios.db"

    # Scenario service credentials (single shared pair)
    scenario_username: str = "pi"
    scenario_password: str = "change-me"
    auth_realm: str = "Property Forecaster"

    # Outbound data sources
    http_timeout_seconds: float = 10.0
    user_agent: str = "property-forecaster/0.1"

    # App
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
