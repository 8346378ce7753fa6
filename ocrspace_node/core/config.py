from __future__ import annotations

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    # OCR provider: ocrspace | mock
    ocr_provider: str = "ocrspace"

    # OCR.space (only needed when ocr_provider=ocrspace)
    ocrspace_api_key: SecretStr | None = None
    ocrspace_endpoint: str = "https://api.ocr.space/parse/image"
    request_timeout_seconds: float = 60.0

    # Default failure isolation for /node/execute when the caller omits it
    continue_on_fail: bool = False


settings = Settings()
