"""
核心模块 - 命名连接注册与生命周期管理
"""

from .connection_store import ConnectionStore, get_connection_store
from .connection_manager import ConnectionManager, get_connection_manager
from .config_loader import build_connection_config, load_connection_config
from .handler_resolver import resolve_handler
from .named_connection import ConnectionOutcome, NamedConnection, NamedConnectionConfig
from .exceptions import (
    ConnectionHubError,
    InvalidArgumentError,
    IllegalAssignmentError,
    ConnectionConfigError,
    HandlerResolutionError,
)
from . import stores

__all__ = [
    "ConnectionStore",
    "get_connection_store",
    "ConnectionManager",
    "get_connection_manager",
    "build_connection_config",
    "load_connection_config",
    "resolve_handler",
    "ConnectionOutcome",
    "NamedConnection",
    "NamedConnectionConfig",
    "ConnectionHubError",
    "InvalidArgumentError",
    "IllegalAssignmentError",
    "ConnectionConfigError",
    "HandlerResolutionError",
    "stores",
]
