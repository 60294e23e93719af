"""
命名连接生命周期管理器
按声明依次执行 connect -> ensure -> disconnect，单个连接失败不影响整批
"""

import inspect
import logging
from typing import Any, Callable, List, Optional

from .connection_store import ConnectionStore, get_connection_store
from .handler_resolver import resolve_handler
from .named_connection import (
    ConnectionOutcome,
    NamedConnection,
    NamedConnectionConfig,
    PHASE_CONNECT,
    PHASE_DISCONNECT,
    PHASE_ENSURE,
)

logger = logging.getLogger(__name__)


async def _call(handler: Callable, *args) -> Any:
    """调用处理器，兼容同步与异步函数"""
    result = handler(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


def _accepts_connection(handler: Callable) -> bool:
    """处理器是否接受第二个位置参数（当前连接）"""
    try:
        parameters = inspect.signature(handler).parameters.values()
    except (TypeError, ValueError):
        return False

    positional = 0
    for parameter in parameters:
        if parameter.kind == parameter.VAR_POSITIONAL:
            return True
        if parameter.kind in (
            parameter.POSITIONAL_ONLY,
            parameter.POSITIONAL_OR_KEYWORD,
        ):
            positional += 1
    return positional >= 2


class ConnectionManager:
    """
    连接管理器

    特点：
    - 三个阶段各自完整遍历所有声明，逐个 await，不并发
    - 单个声明失败只记录日志和结果，不中断整批
    - 没有重试、超时和回滚
    """

    def __init__(
        self,
        connection_config: Optional[List[NamedConnectionConfig]] = None,
        store: Optional[ConnectionStore] = None,
    ):
        self._connection_config: List[NamedConnectionConfig] = list(
            connection_config or []
        )
        self._store = store if store is not None else get_connection_store()

    @property
    def connection_config(self) -> List[NamedConnectionConfig]:
        return self._connection_config

    @property
    def store(self) -> ConnectionStore:
        return self._store

    # ==================== 注册表代理 ====================

    def get_client(self, store_name: str, connection_name: str) -> Any:
        return self._store.get_named_connection(store_name, connection_name)

    def get_named_connections(self) -> List[NamedConnection]:
        return self._store.get_named_connections()

    def get_store_named_connections(self, store_name: str) -> List[NamedConnection]:
        return self._store.get_store_named_connections(store_name)

    def add_named_connection(
        self, store_name: str, connection_name: str, connection: Any
    ) -> Any:
        connection = self._store.add_named_connection(
            store_name, connection_name, connection
        )
        logger.info(f"➕ 已添加命名连接 - {store_name}['{connection_name}']")
        return connection

    def remove_named_connection(
        self, store_name: str, connection_name: str
    ) -> Optional[NamedConnection]:
        removed = self._store.remove_named_connection(store_name, connection_name)
        logger.info(f"➖ 已移除命名连接 - {store_name}['{connection_name}']")
        return removed

    # ==================== 生命周期 ====================

    async def init(self, on_complete: Optional[Callable] = None) -> List[ConnectionOutcome]:
        """
        初始化全部连接：connect -> ensure -> on_complete

        任何异常都只记录日志，不向调用方抛出。

        Args:
            on_complete: 完成回调（同步或异步）

        Returns:
            List[ConnectionOutcome]: connect 与 ensure 阶段的执行结果
        """
        outcomes: List[ConnectionOutcome] = []
        try:
            outcomes.extend(await self.connect())
            outcomes.extend(await self.ensure())

            if on_complete is not None:
                await _call(on_complete)
        except Exception as e:
            logger.error(f"❌ 连接初始化失败: {e}", exc_info=True)

        return outcomes

    async def connect(self) -> List[ConnectionOutcome]:
        """连接全部声明"""
        outcomes = []

        for config in self._connection_config:
            logger.info(f"🔄 {config.label} - 正在连接...")

            try:
                handler = self._get_handler(config, PHASE_CONNECT)
                connection = await _call(handler, config.props)

                self.add_named_connection(
                    config.store_name, config.connection_name, connection
                )
                config.connection = connection
                logger.info(f"✅ {config.label} - 已连接")
                outcomes.append(self._outcome(config, PHASE_CONNECT))
            except Exception as e:
                logger.error(f"❌ {config.label} - 连接失败: {e}")
                outcomes.append(self._outcome(config, PHASE_CONNECT, e))

        return outcomes

    async def ensure(self) -> List[ConnectionOutcome]:
        """对 should_ensure 为真的声明执行连接后配置"""
        outcomes = []

        for config in self._connection_config:
            if not config.should_ensure:
                continue

            logger.info(f"🔄 {config.label} - 正在配置...")

            try:
                handler = self._get_handler(config, PHASE_ENSURE)
                await self._call_with_connection(handler, config)

                logger.info(f"✅ {config.label} - 已配置")
                outcomes.append(self._outcome(config, PHASE_ENSURE))
            except Exception as e:
                logger.error(f"❌ {config.label} - 配置失败: {e}")
                outcomes.append(self._outcome(config, PHASE_ENSURE, e))

        return outcomes

    async def disconnect(self) -> List[ConnectionOutcome]:
        """断开全部声明，成功后从注册表移除"""
        outcomes = []

        for config in self._connection_config:
            logger.info(f"🔄 {config.label} - 正在断开...")

            try:
                handler = self._get_handler(config, PHASE_DISCONNECT)
                await self._call_with_connection(handler, config)

                self.remove_named_connection(config.store_name, config.connection_name)
                config.connection = None

                logger.info(f"✅ {config.label} - 已断开")
                outcomes.append(self._outcome(config, PHASE_DISCONNECT))
            except Exception as e:
                logger.error(f"❌ {config.label} - 断开失败: {e}")
                outcomes.append(self._outcome(config, PHASE_DISCONNECT, e))

        return outcomes

    # ==================== 内部方法 ====================

    def _get_handler(self, config: NamedConnectionConfig, phase: str) -> Callable:
        """优先使用声明中直接提供的处理器，否则按 service_path 解析并缓存"""
        attr = f"{phase}_handler"
        handler = getattr(config, attr)
        if handler is None:
            handler = resolve_handler(config.service_path, config.handler_name(phase))
            setattr(config, attr, handler)
        return handler

    @staticmethod
    async def _call_with_connection(
        handler: Callable, config: NamedConnectionConfig
    ) -> Any:
        """ensure / disconnect 处理器：props 原样传入，接受两个参数时再传入当前连接"""
        if _accepts_connection(handler):
            return await _call(handler, config.props, config.connection)
        return await _call(handler, config.props)

    @staticmethod
    def _outcome(
        config: NamedConnectionConfig, phase: str, error: Optional[BaseException] = None
    ) -> ConnectionOutcome:
        return ConnectionOutcome(
            store_name=config.store_name,
            connection_name=config.connection_name,
            phase=phase,
            success=error is None,
            error=error,
        )


# ==================== 便捷函数 ====================

_global_manager: Optional[ConnectionManager] = None


def get_connection_manager(
    connection_config: Optional[List[NamedConnectionConfig]] = None,
) -> ConnectionManager:
    """
    获取全局连接管理器单例

    首次调用时使用传入的声明创建，之后的调用忽略参数。

    Returns:
        ConnectionManager: 连接管理器实例
    """
    global _global_manager
    if _global_manager is None:
        _global_manager = ConnectionManager(connection_config)
    return _global_manager
