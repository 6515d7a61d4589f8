"""路由模块"""

from . import health, market

__all__ = ["health", "market"]
