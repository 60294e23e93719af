#!/usr/bin/env python3
"""
启动脚本: 启动连接管理 FastAPI 服务
"""

import argparse
import logging
import sys
from pathlib import Path
import uvicorn

# 添加项目根目录到Python路径
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from src.config.settings import get_settings
from src.connection_hub.app import create_app


def setup_logging(level: str, log_format: str):
    """配置日志"""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=log_format,
        stream=sys.stderr,
    )


def main():
    """主函数"""
    settings = get_settings()

    parser = argparse.ArgumentParser(description="命名连接管理服务")
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"监听地址 (默认: {settings.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"监听端口 (默认: {settings.port})",
    )
    parser.add_argument(
        "--config",
        default=settings.connections_config,
        help="连接声明 JSON 文件 (默认读取 CONNECTIONS_CONFIG)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=settings.log_level.upper(),
        help=f"日志级别 (默认: {settings.log_level})",
    )

    args = parser.parse_args()

    setup_logging(args.log_level, settings.log_format)
    logger = logging.getLogger(__name__)

    if args.config:
        settings.connections_config = args.config

    try:
        app = create_app()
        logger.info(f"🚀 连接管理服务将在 http://{args.host}:{args.port} 启动")
        uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())
    except KeyboardInterrupt:
        logger.info("🛑 收到中断信号，正在关闭服务器...")
    except Exception as e:
        logger.error(f"❌ 服务器运行失败: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
