"""
应用配置管理

使用 pydantic-settings 管理环境变量和配置
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    应用配置类

    自动从环境变量和 .env 文件读取配置
    """

    # ========== 应用环境 ==========
    app_env: Literal["test", "dev", "staging", "prod"] = "dev"
    app_name: str = "GameMailService"
    app_version: str = "1.0.0"
    debug: bool = False

    # ========== 存储配置 ==========
    # memory: 进程内存储（开发/测试）；database: SQLAlchemy 持久化
    store_backend: Literal["memory", "database"] = "memory"

    # 开发环境（SQLite）
    dev_db_path: str = "data/dev.db"

    # Staging / 生产环境
    staging_database_url: str = ""
    prod_database_url: str = ""
    db_pool_size: int = 10
    db_max_overflow: int = 20

    # ========== 邮件配置 ==========
    mail_namespace: str = "mails"
    mail_id_base: int = Field(default=1000, ge=0)

    # ========== 背包服务配置 ==========
    # 为空时使用进程内背包（开发/测试）
    inventory_api_base_url: str = ""
    inventory_timeout: float = Field(default=10.0, gt=0)
    inventory_default_capacity: int = Field(default=100, ge=0)

    # ========== 日志配置 ==========
    log_level: str = "INFO"
    log_file: str = "logs/app.log"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # 忽略未定义的环境变量
    )

    @property
    def is_test(self) -> bool:
        """是否为测试环境"""
        return self.app_env == "test"

    @property
    def is_dev(self) -> bool:
        """是否为开发环境"""
        return self.app_env == "dev"

    @property
    def is_staging(self) -> bool:
        """是否为 staging 环境"""
        return self.app_env == "staging"

    @property
    def is_prod(self) -> bool:
        """是否为生产环境"""
        return self.app_env == "prod"

    @property
    def inventory_backend(self) -> str:
        """背包服务实现：配置了 API 地址时使用 http，否则 memory"""
        return "http" if self.inventory_api_base_url else "memory"

    @property
    def database_url(self) -> str:
        """获取当前环境的数据库 URL"""
        if self.is_test:
            return "sqlite:///:memory:"
        elif self.is_dev:
            return f"sqlite:///{self.dev_db_path}"
        elif self.is_staging:
            return self.staging_database_url
        else:  # prod
            return self.prod_database_url


# 全局配置实例（单例）
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    获取配置实例（单例模式）

    Returns:
        Settings 实例
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
