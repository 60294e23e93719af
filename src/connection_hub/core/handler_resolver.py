"""
连接处理器解析

约定位置: <service_path>.connection.<handler_name>
- connection 模块中的同名函数
- 或 connection 包下的同名子模块，导出同名函数或 default
"""

import importlib
import logging
from types import ModuleType
from typing import Any, Callable, Optional

from .exceptions import HandlerResolutionError

logger = logging.getLogger(__name__)


def _unwrap(ref: Any, handler_name: str) -> Optional[Callable]:
    """取出可调用的处理器，兼容 default 包装"""
    if callable(ref) and not isinstance(ref, ModuleType):
        return ref

    for attr in (handler_name, "default"):
        candidate = getattr(ref, attr, None)
        if callable(candidate) and not isinstance(candidate, ModuleType):
            return candidate

    return None


def resolve_handler(service_path: str, handler_name: str) -> Callable:
    """
    根据 service_path 解析处理器

    Args:
        service_path: 服务模块路径，如 src.connection_hub.services.redis
        handler_name: 处理器名称，如 connect / ensure / disconnect

    Returns:
        Callable: 处理器

    Raises:
        HandlerResolutionError: 模块不存在或没有可调用的处理器
    """
    if not service_path:
        raise HandlerResolutionError(service_path, handler_name, "未配置 service_path")

    module_path = f"{service_path}.connection"
    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        raise HandlerResolutionError(service_path, handler_name, str(e)) from e

    ref = getattr(module, handler_name, None)
    if ref is None and hasattr(module, "__path__"):
        try:
            ref = importlib.import_module(f"{module_path}.{handler_name}")
        except ImportError as e:
            raise HandlerResolutionError(service_path, handler_name, str(e)) from e

    if ref is None:
        raise HandlerResolutionError(service_path, handler_name, "处理器不存在")

    handler = _unwrap(ref, handler_name)
    if handler is None:
        raise HandlerResolutionError(service_path, handler_name, "未找到可调用对象")

    logger.debug(f"🔍 解析处理器: {module_path}.{handler_name}")
    return handler
