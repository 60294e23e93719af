"""
连接声明加载
从 JSON 文件读取连接声明列表
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import ValidationError

from .exceptions import ConnectionConfigError
from .named_connection import NamedConnectionConfig

logger = logging.getLogger(__name__)


def build_connection_config(entries: Sequence[Dict[str, Any]]) -> List[NamedConnectionConfig]:
    """
    校验并构建连接声明

    Args:
        entries: 声明字典列表，字段名支持 snake_case 与 camelCase

    Returns:
        List[NamedConnectionConfig]: 连接声明列表

    Raises:
        ConnectionConfigError: 输入不是列表或某条声明不合法
    """
    if not isinstance(entries, (list, tuple)):
        raise ConnectionConfigError("连接声明必须是列表")

    configs = []
    for index, entry in enumerate(entries):
        try:
            configs.append(NamedConnectionConfig.model_validate(entry))
        except ValidationError as e:
            raise ConnectionConfigError(f"第 {index} 条连接声明不合法: {e}") from e

    return configs


def load_connection_config(
    path: Optional[Union[str, Path]],
) -> List[NamedConnectionConfig]:
    """
    从 JSON 文件加载连接声明

    Args:
        path: 配置文件路径，为空时返回空列表

    Returns:
        List[NamedConnectionConfig]: 连接声明列表
    """
    if not path:
        return []

    config_path = Path(path)
    if not config_path.is_file():
        raise ConnectionConfigError(f"连接配置文件不存在: {config_path}")

    try:
        with config_path.open("r", encoding="utf-8") as f:
            entries = json.load(f)
    except json.JSONDecodeError as e:
        raise ConnectionConfigError(f"连接配置文件格式错误: {e}") from e

    configs = build_connection_config(entries)
    logger.info(f"📋 已加载 {len(configs)} 条连接声明: {config_path}")
    return configs
