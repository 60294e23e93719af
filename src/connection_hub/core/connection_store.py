"""
命名连接存储
进程级的连接目录：store_name -> connection_name -> connection
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Any, List, Optional, Sequence
import logging

from .exceptions import InvalidArgumentError, IllegalAssignmentError
from .named_connection import NamedConnection
from . import stores

logger = logging.getLogger(__name__)


def _field(entry: Any, name: str) -> Any:
    """从 dict 或对象中读取字段"""
    if isinstance(entry, Mapping):
        return entry.get(name)
    return getattr(entry, name, None)


def _missing_connection(connection: Any) -> bool:
    """None 与空字符串都视为未提供连接"""
    return connection is None or (isinstance(connection, str) and not connection)


def _ensure_sequence(named_connections: Any) -> None:
    if named_connections is None:
        raise InvalidArgumentError("'named_connections' 为必填参数")
    if not isinstance(named_connections, (list, tuple)):
        raise InvalidArgumentError("'named_connections' 必须是列表")


class ConnectionStore:
    """
    命名连接存储

    特点：
    - 同一 (store_name, connection_name) 只保留一个连接，重复添加直接覆盖
    - 查询不存在的连接返回 None，不抛异常
    - named_connections 只读，只能通过本类方法修改
    - 不做任何 I/O，也不加锁（运行在单线程事件循环中）
    """

    def __init__(self):
        self._named_connections: Dict[str, Dict[str, Any]] = {}

    def __setattr__(self, name: str, value: Any):
        if name == "_named_connections" and "_named_connections" in self.__dict__:
            raise IllegalAssignmentError(
                "ConnectionStore._named_connections 为私有状态，不能直接赋值"
            )
        super().__setattr__(name, value)

    @property
    def named_connections(self) -> Mapping:
        """当前连接状态的只读快照"""
        return MappingProxyType(
            {
                store_name: MappingProxyType(dict(connections))
                for store_name, connections in self._named_connections.items()
            }
        )

    @named_connections.setter
    def named_connections(self, value: Any):
        raise IllegalAssignmentError(
            "ConnectionStore.named_connections 为只读属性，不能直接赋值"
        )

    # ==================== 添加 ====================

    def add_named_connection(
        self, store_name: str, connection_name: str, connection: Any
    ) -> Any:
        """
        添加一个命名连接

        Args:
            store_name: 存储类型 (见 stores 中的命名约定)
            connection_name: 连接名称
            connection: 连接对象

        Returns:
            Any: 存入的连接对象

        Raises:
            InvalidArgumentError: 参数缺失时抛出
        """
        if not store_name:
            raise InvalidArgumentError("添加命名连接需要 'store_name'")
        if not connection_name:
            raise InvalidArgumentError("添加命名连接需要 'connection_name'")
        if _missing_connection(connection):
            raise InvalidArgumentError("添加命名连接需要 'connection'")

        if store_name not in self._named_connections:
            self._named_connections[store_name] = {}

        self._named_connections[store_name][connection_name] = connection
        return connection

    def add_named_connections(self, named_connections: Sequence[Any]) -> Sequence[Any]:
        """
        批量添加命名连接

        按输入顺序逐条添加；中途校验失败时，之前的条目已经生效。

        Args:
            named_connections: 含 store_name / connection_name / connection 的条目列表

        Returns:
            原始输入列表
        """
        _ensure_sequence(named_connections)

        for named_connection in named_connections:
            store_name = _field(named_connection, "store_name")
            connection_name = _field(named_connection, "connection_name")
            connection = _field(named_connection, "connection")

            if not store_name:
                raise InvalidArgumentError("添加命名连接需要 'store_name'")
            if not connection_name:
                raise InvalidArgumentError("添加命名连接需要 'connection_name'")
            if _missing_connection(connection):
                raise InvalidArgumentError("添加命名连接需要 'connection'")

            self.add_named_connection(store_name, connection_name, connection)

        return named_connections

    # ==================== 查询 ====================

    def get_named_connection(self, store_name: str, connection_name: str) -> Any:
        """
        获取命名连接

        Returns:
            连接对象，不存在时返回 None
        """
        if not store_name:
            raise InvalidArgumentError("获取命名连接需要 'store_name'")
        if not connection_name:
            raise InvalidArgumentError("获取命名连接需要 'connection_name'")

        return self._named_connections.get(store_name, {}).get(connection_name)

    def get_store_named_connections(self, store_name: str) -> List[NamedConnection]:
        """获取某个存储类型下的全部命名连接，不存在时返回空列表"""
        connections = self._named_connections.get(store_name)
        if not connections:
            return []

        return [
            NamedConnection(store_name, connection_name, connection)
            for connection_name, connection in connections.items()
        ]

    def get_named_connections(self) -> List[NamedConnection]:
        """获取全部命名连接"""
        named_connections = []
        for store_name in list(self._named_connections):
            named_connections.extend(self.get_store_named_connections(store_name))
        return named_connections

    # ==================== 删除 ====================

    def remove_named_connection(
        self, store_name: str, connection_name: str
    ) -> Optional[NamedConnection]:
        """
        删除命名连接

        Returns:
            被删除的命名连接，不存在时返回 None
        """
        if not store_name:
            raise InvalidArgumentError("删除命名连接需要 'store_name'")
        if not connection_name:
            raise InvalidArgumentError("删除命名连接需要 'connection_name'")

        connections = self._named_connections.get(store_name)
        if not connections or connection_name not in connections:
            return None

        connection = connections.pop(connection_name)
        if not connections:
            del self._named_connections[store_name]

        return NamedConnection(store_name, connection_name, connection)

    def remove_named_connections(
        self, named_connections: Sequence[Any]
    ) -> List[Optional[NamedConnection]]:
        """批量删除命名连接，按输入顺序返回每条的删除结果"""
        _ensure_sequence(named_connections)

        removed = []
        for named_connection in named_connections:
            store_name = _field(named_connection, "store_name")
            connection_name = _field(named_connection, "connection_name")

            if not store_name:
                raise InvalidArgumentError("删除命名连接需要 'store_name'")
            if not connection_name:
                raise InvalidArgumentError("删除命名连接需要 'connection_name'")

            removed.append(self.remove_named_connection(store_name, connection_name))

        return removed

    def clear_named_connections(self) -> List[NamedConnection]:
        """清空全部连接，返回被删除的命名连接"""
        removed = []
        for store_name in list(self._named_connections):
            store_connections = self.get_store_named_connections(store_name)
            removed.extend(self.remove_named_connections(store_connections))
        return removed

    # ==================== Mongo 便捷方法 ====================

    def add_mongo_connection(self, connection_name: str, connection: Any) -> Any:
        return self.add_named_connection(stores.MONGO, connection_name, connection)

    def get_mongo_connection(self, connection_name: str) -> Any:
        return self.get_named_connection(stores.MONGO, connection_name)

    def remove_mongo_connection(
        self, connection_name: str
    ) -> Optional[NamedConnection]:
        return self.remove_named_connection(stores.MONGO, connection_name)

    def debug(self):
        """输出当前连接状态"""
        logger.info("*** ConnectionStore - DEBUG - START ***")
        for store_name, connections in self._named_connections.items():
            logger.info(f"{store_name}: {list(connections)}")
        logger.info("*** ConnectionStore - DEBUG -  END  ***")


# ==================== 便捷函数 ====================

_global_store: Optional[ConnectionStore] = None


def get_connection_store() -> ConnectionStore:
    """
    获取进程级连接存储单例

    Returns:
        ConnectionStore: 连接存储实例
    """
    global _global_store
    if _global_store is None:
        _global_store = ConnectionStore()
    return _global_store
