"""
MySQL 连接处理器

props 字段（缺省时使用 Settings 中的 MySQL 配置）:
    - host / port / user / password / database
    - pool_size: 连接池大小（默认10）
    - charset: 字符集（默认utf8mb4）
    - schema: ensure 阶段依次执行的 SQL 语句列表

ensure / disconnect 的第二个参数 pool 为 connect 返回的连接池。
处理器均为同步函数，数据库调用会阻塞事件循环，只适合在启动和关闭阶段调用。
"""

from typing import Dict, Any, Optional
import logging

import pymysql
from pymysql.cursors import DictCursor
from dbutils.pooled_db import PooledDB

from ....config.settings import get_settings

logger = logging.getLogger(__name__)


def connect(props: Dict[str, Any]) -> PooledDB:
    """
    建立 MySQL 连接池

    Returns:
        PooledDB: MySQL 连接池

    Raises:
        ValueError: 未配置 database
    """
    settings = get_settings()
    host = props.get("host", settings.mysql_host)
    port = props.get("port", settings.mysql_port)
    user = props.get("user", settings.mysql_user)
    database = props.get("database", settings.mysql_database)
    pool_size = props.get("pool_size", settings.mysql_pool_size)

    if not database:
        raise ValueError("MySQL database 未配置")

    logger.info(f"🔄 正在连接 MySQL: {user}@{host}:{port}/{database}")

    pool = PooledDB(
        creator=pymysql,
        maxconnections=pool_size,
        mincached=2,
        maxcached=5,
        blocking=True,
        host=host,
        port=port,
        user=user,
        password=props.get("password", settings.mysql_password),
        database=database,
        charset=props.get("charset", "utf8mb4"),
        cursorclass=DictCursor,
    )

    # 测试连接
    connection = pool.connection()
    try:
        cursor = connection.cursor()
        cursor.execute("SELECT 1")
        cursor.fetchone()
        cursor.close()
    finally:
        connection.close()

    logger.info(f"✅ MySQL 连接池创建成功 (池大小: {pool_size})")
    return pool


def ensure(props: Dict[str, Any], pool: Optional[PooledDB] = None) -> None:
    """依次执行 props['schema'] 中的建表/索引语句"""
    if pool is None:
        raise ValueError("MySQL 连接池未初始化")

    statements = props.get("schema", [])
    if not statements:
        return

    connection = pool.connection()
    try:
        cursor = connection.cursor()
        for sql in statements:
            cursor.execute(sql)
        connection.commit()
        cursor.close()
        logger.info(f"✅ MySQL 已执行 {len(statements)} 条初始化语句")
    except Exception:
        connection.rollback()
        raise
    finally:
        connection.close()


def disconnect(props: Dict[str, Any], pool: Optional[PooledDB] = None) -> None:
    """关闭 MySQL 连接池"""
    if pool is None:
        logger.warning("⚠️ MySQL 连接池未初始化，无需关闭")
        return

    pool.close()
    logger.info("✅ MySQL 连接池已关闭")
