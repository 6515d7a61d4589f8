# src/data/base.py
"""行情数据客户端抽象基类"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from .models import GlobalQuote, PriceBar


class BaseMarketDataClient(ABC):
    """行情数据客户端抽象基类

    定义统一的数据获取接口，支持多数据源扩展。
    """

    @abstractmethod
    def get_global_quote(self, symbol: str) -> GlobalQuote:
        """获取实时报价

        Args:
            symbol: 股票代码，如 "IBM"

        Returns:
            报价数据
        """
        pass

    @abstractmethod
    def get_daily_series(
        self,
        symbol: str,
        outputsize: str = "full"
    ) -> List[PriceBar]:
        """获取日线历史数据

        Args:
            symbol: 股票代码
            outputsize: "compact" (最近 100 根) 或 "full" (全部历史)

        Returns:
            K 线数据列表（按时间正序）
        """
        pass
