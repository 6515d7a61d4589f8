# src/messages/__init__.py
"""消息模块 - 统一管理错误消息、告警文案等"""

from .errorMessage import ErrorMessage, ProviderType, MessageBuilder

__all__ = ["ErrorMessage", "ProviderType", "MessageBuilder"]
