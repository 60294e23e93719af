"""
命名连接数据模型
"""

from dataclasses import dataclass
from typing import Dict, Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# 生命周期阶段
PHASE_CONNECT = "connect"
PHASE_ENSURE = "ensure"
PHASE_DISCONNECT = "disconnect"


@dataclass
class NamedConnection:
    """注册表中的一条命名连接 (store_name, connection_name, connection)"""

    store_name: str
    connection_name: str
    connection: Any


@dataclass
class ConnectionOutcome:
    """单个声明在某个生命周期阶段的执行结果"""

    store_name: str
    connection_name: str
    phase: str
    success: bool
    error: Optional[BaseException] = None


class NamedConnectionConfig(BaseModel):
    """
    命名连接声明

    描述如何建立、配置和关闭一条命名连接。处理器可以直接以可调用对象提供
    (connect_handler / ensure_handler / disconnect_handler)，
    也可以通过 service_path 在 <service_path>.connection 下按名称解析。
    同时接受 snake_case 与 camelCase 字段名。
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    store_name: str = Field(..., min_length=1)
    connection_name: str = Field(..., min_length=1)
    props: Dict[str, Any] = Field(default_factory=dict)
    service_path: Optional[str] = None

    connect_handler_name: Optional[str] = None
    ensure_handler_name: Optional[str] = None
    disconnect_handler_name: Optional[str] = None
    should_ensure: bool = False

    connect_handler: Optional[Callable[..., Any]] = Field(default=None, exclude=True)
    ensure_handler: Optional[Callable[..., Any]] = Field(default=None, exclude=True)
    disconnect_handler: Optional[Callable[..., Any]] = Field(
        default=None, exclude=True
    )

    # 连接成功后回填
    connection: Optional[Any] = Field(default=None, exclude=True)

    @property
    def label(self) -> str:
        """日志中使用的连接标识"""
        return f"{self.store_name}['{self.connection_name}']"

    def handler_name(self, phase: str) -> str:
        """返回指定阶段的处理器名称，未覆盖时使用阶段名"""
        return getattr(self, f"{phase}_handler_name") or phase
