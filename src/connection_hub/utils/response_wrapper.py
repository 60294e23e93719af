"""
通用API响应封装器
提供统一的API返回格式

响应格式:
{
    "status": "success" | "error",
    "message": "操作描述信息",
    "data": {...} | [...] | null
}
"""

from typing import Any, Optional, Dict
from enum import Enum


class ResponseStatus(Enum):
    """响应状态枚举"""

    SUCCESS = "success"
    ERROR = "error"


def success_response(data: Any = None, message: str = "操作成功") -> Dict[str, Any]:
    """
    成功响应

    Args:
        data: 响应数据
        message: 成功消息
    """
    return {
        "status": ResponseStatus.SUCCESS.value,
        "message": message,
        "data": data,
    }


def error_response(
    message: str = "操作失败",
    error_code: Optional[str] = None,
) -> Dict[str, Any]:
    """
    错误响应

    Args:
        message: 错误消息
        error_code: 错误代码(可选)
    """
    response = {
        "status": ResponseStatus.ERROR.value,
        "message": message,
        "data": None,
    }

    if error_code:
        response["error_code"] = error_code

    return response
