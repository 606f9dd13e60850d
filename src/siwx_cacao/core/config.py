from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[3]

MIN_NONCE_LENGTH = 8


class Settings(BaseSettings):
    app_name: str = "siwx-cacao-verifier"
    app_env: str = "development"
    app_port: int = 8000

    clock_skew_seconds: int = 300
    revocation_phase_out_seconds: int = 0
    disable_expiration_check: bool = False

    nonce_length: int = 17

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=(str(BASE_DIR / ".env"), ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def effective_nonce_length(self) -> int:
        return max(MIN_NONCE_LENGTH, self.nonce_length)


settings = Settings()
