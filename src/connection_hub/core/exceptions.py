"""
连接管理异常定义

契约错误（参数缺失、非法赋值、配置错误）直接抛给调用方；
处理器解析错误属于运行期错误，由 ConnectionManager 按声明捕获并记录。
"""


class ConnectionHubError(Exception):
    """连接管理模块异常基类"""


class InvalidArgumentError(ConnectionHubError, ValueError):
    """缺少必要参数或参数类型不正确"""


class IllegalAssignmentError(ConnectionHubError, AttributeError):
    """试图直接修改只读的连接状态"""


class ConnectionConfigError(ConnectionHubError):
    """连接声明配置无法加载或校验失败"""


class HandlerResolutionError(ConnectionHubError):
    """无法根据 service_path 解析出连接处理器"""

    def __init__(self, service_path, handler_name, reason: str = ""):
        self.service_path = service_path
        self.handler_name = handler_name
        message = f"无法解析处理器 {service_path}.connection.{handler_name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
