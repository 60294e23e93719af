"""
连接查询 API 路由
只读地暴露注册表中的命名连接
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ..core import ConnectionManager, NamedConnection
from ..utils.response_wrapper import success_response, error_response

logger = logging.getLogger(__name__)
router = APIRouter()


def _manager(request: Request) -> ConnectionManager:
    return request.app.state.connection_manager


def _serialize(named_connection: NamedConnection) -> Dict[str, Any]:
    """连接对象不可序列化，只返回其类型名"""
    return {
        "store_name": named_connection.store_name,
        "connection_name": named_connection.connection_name,
        "connection_type": type(named_connection.connection).__name__,
    }


@router.get("/connections")
async def list_connections(request: Request):
    """列出全部命名连接"""
    connections = _manager(request).get_named_connections()
    return success_response(
        [_serialize(item) for item in connections],
        f"共 {len(connections)} 个命名连接",
    )


@router.get("/connections/{store_name}")
async def list_store_connections(store_name: str, request: Request):
    """列出某个存储类型下的命名连接"""
    connections = _manager(request).get_store_named_connections(store_name)
    return success_response(
        [_serialize(item) for item in connections],
        f"{store_name} 共 {len(connections)} 个命名连接",
    )


@router.get("/connections/{store_name}/{connection_name}")
async def get_connection(store_name: str, connection_name: str, request: Request):
    """获取单个命名连接"""
    connection = _manager(request).get_client(store_name, connection_name)
    if connection is None:
        logger.warning(f"⚠️ 未找到命名连接: {store_name}['{connection_name}']")
        return JSONResponse(
            status_code=404,
            content=error_response(
                f"未找到命名连接: {store_name}['{connection_name}']",
                error_code="CONNECTION_NOT_FOUND",
            ),
        )

    return success_response(
        _serialize(NamedConnection(store_name, connection_name, connection))
    )
