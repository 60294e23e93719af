"""
项目配置设置
"""

import os
from pathlib import Path
from typing import Optional
from functools import lru_cache

from dotenv import load_dotenv

# 加载 .env 文件
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)


def _get_env_var_as_int(name: str, default: str) -> int:
    """安全地从环境变量获取整数值，移除行内注释。"""
    value_str = os.getenv(name, default)
    # 移除注释和两边的空格
    cleaned_value = value_str.split("#")[0].strip()
    return int(cleaned_value)


class Settings:
    """应用配置"""

    def __init__(self):
        # 应用基本信息
        self.app_name: str = os.getenv("APP_NAME", "Connection Hub")
        self.version: str = os.getenv("VERSION", "1.0.0")
        self.description: str = os.getenv(
            "DESCRIPTION", "命名连接注册与生命周期管理服务"
        )

        # 服务器配置
        self.host: str = os.getenv("HOST", "127.0.0.1")
        self.port: int = _get_env_var_as_int("PORT", "8000")

        # 连接声明文件 (JSON)
        self.connections_config: Optional[str] = os.getenv("CONNECTIONS_CONFIG")

        # Redis 默认配置
        self.redis_host: str = os.getenv("REDIS_HOST", "localhost")
        self.redis_port: int = _get_env_var_as_int("REDIS_PORT", "6379")
        self.redis_db: int = _get_env_var_as_int("REDIS_DB", "0")
        self.redis_password: Optional[str] = os.getenv("REDIS_PASSWORD")

        # MySQL 默认配置
        self.mysql_host: str = os.getenv("MYSQL_HOST", "localhost")
        self.mysql_port: int = _get_env_var_as_int("MYSQL_PORT", "3306")
        self.mysql_user: str = os.getenv("MYSQL_USER", "root")
        self.mysql_password: str = os.getenv("MYSQL_PASSWORD", "")
        self.mysql_database: Optional[str] = os.getenv("MYSQL_DATABASE")
        self.mysql_pool_size: int = _get_env_var_as_int("MYSQL_POOL_SIZE", "10")

        # 日志配置
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")
        self.log_format: str = os.getenv(
            "LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )


@lru_cache()
def get_settings() -> Settings:
    """获取配置实例（单例模式）"""
    return Settings()
