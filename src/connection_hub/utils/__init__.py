# Utils module
"""
工具模块
"""

from .response_wrapper import success_response, error_response

__all__ = ["success_response", "error_response"]
