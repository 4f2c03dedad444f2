from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # App
    APP_NAME: str = "Payments Engine"
    DEBUG: bool = False  # DEBUG=True adds module:line to log records

    # Logging (diagnostics go to stderr, never to the CSV on stdout)
    LOG_LEVEL: str = "WARNING"

    # Ledger
    VERIFY_INVARIANTS: bool = True  # check account balances after every applied record


settings = Settings()
