"""
配置管理模块 - 使用 Pydantic BaseSettings
支持从环境变量和配置文件加载配置
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def load_config_file(config_path: str):
    """
    从配置文件加载配置（支持 .env 和 YAML）

    Args:
        config_path: 配置文件路径
    """
    if config_path.endswith('.env'):
        from dotenv import load_dotenv
        load_dotenv(config_path, override=True)

    elif config_path.endswith(('.yml', '.yaml')):
        import yaml
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}
            for key, value in config_data.items():
                os.environ[key.upper()] = str(value)

    else:
        raise ValueError(f'不支持的配置文件类型: {config_path}')


class Settings(BaseSettings):
    """应用配置 - 使用 Pydantic 自动验证和类型转换"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # ========== 应用基础配置 ==========
    app_name: str = Field(default="task-repository", alias="APP_NAME")
    debug: bool = Field(default=False, alias="DEBUG")

    # ========== 数据库连接配置 ==========
    # 完整的 SQLAlchemy 连接串，设置后优先于 MySQL 分项配置
    tasks_db: Optional[str] = Field(default=None, alias="TASKS_DB")

    mysql_host: str = Field(default="localhost", alias="MYSQL_HOST")
    mysql_port: int = Field(default=3306, alias="MYSQL_PORT")
    mysql_user: str = Field(default="root", alias="MYSQL_USER")
    mysql_password: str = Field(default="", alias="MYSQL_PASSWORD")
    mysql_database: str = Field(default="tasks", alias="MYSQL_DATABASE")

    @property
    def database_url(self) -> str:
        """构建数据库连接 URL"""
        if self.tasks_db:
            return self.tasks_db
        return f"mysql+pymysql://{self.mysql_user}:{self.mysql_password}@{self.mysql_host}:{self.mysql_port}/{self.mysql_database}"

    # ========== 日志配置 ==========
    logs_dir: str = Field(default="logs", alias="LOGS_DIR")
    logs_name: str = Field(default="tasks.log", alias="LOGS_NAME")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")
    log_max_bytes: int = Field(default=10, alias="LOG_MAX_BYTES")

    @property
    def log_max_bytes_in_bytes(self) -> int:
        """日志文件最大字节数"""
        return self.log_max_bytes * 1024 * 1024

    @property
    def logs_path(self) -> Path:
        """获取日志目录路径，相对路径以项目根目录为基准"""
        logs_path = Path(self.logs_dir)
        if logs_path.is_absolute():
            return logs_path
        root_path = Path(__file__).parent.parent
        return root_path / logs_path

    # ========== 验证器 ==========
    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """验证日志级别"""
        valid_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f'日志级别必须是以下之一: {valid_levels}')
        return v

    @field_validator('mysql_port')
    @classmethod
    def validate_port(cls, v: int) -> int:
        """验证端口号"""
        if not 1 <= v <= 65535:
            raise ValueError('端口号必须在 1-65535 之间')
        return v


@lru_cache()
def get_settings() -> Settings:
    """获取配置单例"""
    return Settings()
