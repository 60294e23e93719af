"""
连接管理服务
主应用入口文件，负责在启动/关闭时驱动连接生命周期
"""

import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI

from .routes.api_routes import router as api_router
from .core import (
    NamedConnectionConfig,
    get_connection_manager,
    load_connection_config,
)
from ..config.settings import get_settings

logger = logging.getLogger(__name__)


def create_app(
    connection_config: Optional[List[NamedConnectionConfig]] = None,
) -> FastAPI:
    """
    创建 FastAPI 应用实例

    Args:
        connection_config: 连接声明，为空时从 CONNECTIONS_CONFIG 指定的文件加载
    """
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """应用生命周期管理"""
        logger.info(f"🚀 启动 {settings.app_name}")

        configs = connection_config
        if configs is None:
            configs = load_connection_config(settings.connections_config)

        manager = get_connection_manager(configs)
        app.state.connection_manager = manager

        await manager.init(
            lambda: logger.info(
                f"✅ 连接初始化完成，共 {len(manager.get_named_connections())} 个可用连接"
            )
        )

        yield

        logger.info(f"🛑 关闭 {settings.app_name}")
        await manager.disconnect()

    app = FastAPI(
        title=settings.app_name,
        description=settings.description,
        version=settings.version,
        lifespan=lifespan,
    )

    app.include_router(api_router, prefix="/api", tags=["Connections"])

    @app.get("/health")
    async def health_check():
        """健康检查"""
        manager = app.state.connection_manager
        return {
            "status": "healthy",
            "service": settings.app_name,
            "connections": len(manager.get_named_connections()),
        }

    return app
