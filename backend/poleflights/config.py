from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App Settings
    app_name: str = "Pole Flights Search"
    env: str = "development"
    log_level: str = "INFO"

    # Third Party: Amadeus
    amadeus_host: str = "https://test.api.amadeus.com"
    amadeus_client_id: str = ""  # Empty credentials switch searches to mock data
    amadeus_client_secret: str = ""
    amadeus_timeout_seconds: float = 15.0
    amadeus_max_results: int = 10
    amadeus_currency_code: str = "USD"

    # CORS
    cors_origins: str = ""  # Comma-separated production origins

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def has_amadeus_credentials(self) -> bool:
        return bool(self.amadeus_client_id and self.amadeus_client_secret)


settings = Settings()
