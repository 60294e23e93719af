"""
Redis 连接处理器

props 字段（缺省时使用 Settings 中的 Redis 配置）:
    - host / port / db / password
    - pool_size: 连接池大小（默认10）
    - decode_responses: 是否自动解码（默认True）
    - config: ensure 阶段通过 CONFIG SET 写入的配置项

ensure / disconnect 的第二个参数 client 为 connect 返回的客户端。
处理器均为同步函数，网络调用会阻塞事件循环，只适合在启动和关闭阶段调用。
"""

from typing import Dict, Any, Optional
import logging

import redis
from redis import ConnectionPool

from ....config.settings import get_settings

logger = logging.getLogger(__name__)


def _get_client(client: Optional[redis.Redis]) -> redis.Redis:
    if client is None:
        raise ValueError("Redis 连接未建立")
    return client


def connect(props: Dict[str, Any]) -> redis.Redis:
    """
    建立 Redis 连接池并返回客户端

    Returns:
        redis.Redis: Redis 客户端

    Raises:
        ConnectionError: PING 失败时抛出
    """
    settings = get_settings()
    host = props.get("host", settings.redis_host)
    port = props.get("port", settings.redis_port)
    db = props.get("db", settings.redis_db)
    pool_size = props.get("pool_size", 10)

    logger.info(f"🔄 正在连接 Redis: {host}:{port}/{db}")

    pool = ConnectionPool(
        host=host,
        port=port,
        db=db,
        password=props.get("password", settings.redis_password),
        max_connections=pool_size,
        decode_responses=props.get("decode_responses", True),
    )
    client = redis.Redis(connection_pool=pool)

    if not client.ping():
        pool.disconnect()
        raise ConnectionError(f"Redis 健康检查失败: {host}:{port}/{db}")

    logger.info(f"✅ Redis 连接成功 (池大小: {pool_size})")
    return client


def ensure(props: Dict[str, Any], client: Optional[redis.Redis] = None) -> None:
    """写入 props['config'] 中的服务端配置并确认连接可用"""
    client = _get_client(client)

    for key, value in props.get("config", {}).items():
        client.config_set(key, value)
        logger.info(f"⚙️ Redis CONFIG SET {key}={value}")

    if not client.ping():
        raise ConnectionError("Redis 健康检查失败")


def disconnect(props: Dict[str, Any], client: Optional[redis.Redis] = None) -> None:
    """关闭 Redis 客户端及其连接池"""
    if client is None:
        logger.warning("⚠️ Redis 连接未建立，无需关闭")
        return

    client.close()
    client.connection_pool.disconnect()
    logger.info("✅ Redis 连接已关闭")
