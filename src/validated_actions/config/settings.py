from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    app_log_level: str = "INFO"
    # Payloads may carry user data; keep them out of logs unless explicitly enabled.
    log_payloads: bool = Field(
        default=False,
        validation_alias=AliasChoices("VALIDATED_ACTIONS_LOG_PAYLOADS", "log_payloads"),
    )

    # Action convention
    # Opt-in: when the wrapped action reported success=False and its data is invalid,
    # return its own messages instead of output validation errors.
    preserve_upstream_failures: bool = False

    # Validation messages
    issue_path_separator: str = "."

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
