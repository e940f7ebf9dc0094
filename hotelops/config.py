"""
应用配置
从环境变量或 .env 读取配置
"""
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """应用设置"""

    # 应用基础配置
    APP_NAME: str = "HotelOps"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # 本地键值存储
    DATABASE_URL: str = "sqlite:///./hotelops.db"
    STORAGE_KEY_PREFIX: str = "hotel_"
    # Browsers cap localStorage at roughly 5 MB per origin
    STORAGE_QUOTA_BYTES: int = 5 * 1024 * 1024

    # 业务配置
    SEED_SAMPLE_DATA: bool = True
    LOW_STAFF_THRESHOLD: int = 3
    RECENT_ACTIVITY_LIMIT: int = 5

    model_config = ConfigDict(env_file=".env", case_sensitive=True)


# 全局设置实例
settings = Settings()
