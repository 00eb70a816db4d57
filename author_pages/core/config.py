# 读取 .env 配置
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # Redis document store
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_DB: int = 0
    REDIS_PASSWORD: Optional[str] = None
    REDIS_UNIX_SOCKET: Optional[str] = None
    # 多环境共用一个 Redis 时用于隔离数据
    REDIS_KEY_PREFIX: str = ""

    # Experiments
    EXPERIMENTS_READ_TIMEOUT_SECONDS: Optional[float] = 5.0

    # Platform stats
    PLATFORM_STATS_CACHE_TTL_SECONDS: int = 3600

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # 忽略多余的环境变量
    )


settings = Settings()
