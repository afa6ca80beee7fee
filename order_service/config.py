from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    host: str = "127.0.0.1"
    port: int = 3000
    dev_logging: bool = False  # only DEV_LOGGING=1 turns on request/response logging

    @field_validator("dev_logging", mode="before")
    @classmethod
    def only_one_enables(cls, v) -> bool:
        """Anything but "1" (blank, "2", "true", ...) means off."""
        if isinstance(v, bool):
            return v
        return str(v) == "1"


settings = Settings()
