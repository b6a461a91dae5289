from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # OCR — Google Cloud Vision REST
    GOOGLE_VISION_API_KEY: str = ""  # REQUIRED for /pdf/analyze, OCR raises without it
    GOOGLE_VISION_ENDPOINT: str = "https://vision.googleapis.com/v1/images:annotate"
    OCR_TIMEOUT_SECONDS: float = 60.0

    # Uploads
    UPLOAD_DIR: str = "uploads"
    MAX_FILE_SIZE_MB: int = 10

    DEFAULT_MATERIAL: str = "aluminium"
    ALLOWED_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"

    # Pricing: shop assumptions, tune per deployment
    SETUP_COST: float = 60.0
    PROGRAMMING_COST: float = 30.0
    MACHINE_RATE_PER_HOUR: float = 35.0
    PROFIT_MARKUP: float = 1.15
    BASE_RUNTIME_MIN: float = 2.0
    RUNTIME_MIN_PER_100MM: float = 1.0
    FEATURE_RUNTIME_MIN: float = 0.5
    TEXT_EXCERPT_LENGTH: int = 300

    @field_validator("LOG_LEVEL")
    @classmethod
    def upper_log_level(cls, value: str) -> str:
        # logging only accepts upper-case level names
        return value.strip().upper()

    class Config:
        env_file = ".env"


settings = Settings()
