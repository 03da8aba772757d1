from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置（环境变量前缀 TASKLIST_，可选 .env 文件）"""

    model_config = SettingsConfigDict(
        env_prefix="TASKLIST_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "Task List API"
    version: str = "1.0.0"

    # 服务端
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]
    seed_tasks: bool = True

    # 客户端
    api_url: str = "http://localhost:3000"
    error_banner_seconds: float = 5.0
    request_timeout: Optional[float] = None


settings = Settings()
