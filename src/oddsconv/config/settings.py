from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ODDS_",
        extra="ignore",
    )

    # Sanity ceilings applied during validation
    american_max: int = 100_000
    decimal_max: float = 1000.0
    fractional_max: int = 10_000

    # Largest denominator produced when projecting onto fractional odds
    fraction_max_denominator: int = 1000

    log_level: str = "INFO"


settings = Settings()
