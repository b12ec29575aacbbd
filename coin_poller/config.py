"""
Configuration settings for Coin Poller

환경 변수를 통해 설정을 관리합니다. 모든 값에 기본값이 있으므로
.env 없이도 실행됩니다.
"""

from pydantic_settings import BaseSettings
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
ENV_FILE = PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings"""

    # Environment
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"

    # Binance API
    BINANCE_BASE_URL: str = "https://api.binance.com"
    REQUEST_TIMEOUT: float = 10.0  # 초

    class Config:
        env_file = str(ENV_FILE)
        case_sensitive = True
        extra = "ignore"


settings = Settings()
