# src/data/models.py
"""
数据层数据模型

定义日线行情、实时报价等市场数据的内存表示。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class PriceBar:
    """日线 K 线数据结构

    Heikin-Ashi 计算的唯一标准输入格式。上游的任何原始格式
    (如 Alpha Vantage 按日期索引的字典) 都必须先转换为 PriceBar。

    Attributes:
        date: 交易日，ISO 格式 "YYYY-MM-DD"
        open: 开盘价
        high: 最高价
        low: 最低价
        close: 收盘价
        volume: 成交量

    Example:
        >>> bar = PriceBar(date="2024-01-02", open=187.15, high=188.44,
        ...                low=183.89, close=185.64, volume=82488700)
        >>> bar.close
        185.64
    """

    date: str
    open: float
    high: float
    low: float
    close: float
    volume: int = 0

    def to_dict(self) -> dict:
        """转换为字典格式"""
        return {
            "date": self.date,
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "close": self.close,
            "volume": self.volume,
        }


@dataclass(frozen=True)
class GlobalQuote:
    """实时报价 (Alpha Vantage GLOBAL_QUOTE)

    Attributes:
        symbol: 股票代码
        open: 开盘价
        high: 最高价
        low: 最低价
        price: 最新价
        volume: 成交量
        latest_trading_day: 最近交易日
        previous_close: 前收盘价
        change: 涨跌额
        change_percent: 涨跌幅，如 "1.2345%"
    """

    symbol: str
    open: float
    high: float
    low: float
    price: float
    volume: int
    latest_trading_day: str
    previous_close: float
    change: float
    change_percent: str

    def to_dict(self) -> dict:
        return {
            "symbol": self.symbol,
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "price": self.price,
            "volume": self.volume,
            "latest_trading_day": self.latest_trading_day,
            "previous_close": self.previous_close,
            "change": self.change,
            "change_percent": self.change_percent,
        }


@dataclass
class HistoricalMetadata:
    """历史数据元信息

    Attributes:
        symbol: 股票代码
        data_points: K 线数量
        oldest_date: 最早交易日
        newest_date: 最近交易日
        warnings: 数据完整性告警
    """

    symbol: str
    data_points: int
    oldest_date: str
    newest_date: str
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """转换为字典格式（前端沿用的 camelCase 键名）"""
        return {
            "symbol": self.symbol,
            "dataPoints": self.data_points,
            "oldestDate": self.oldest_date,
            "newestDate": self.newest_date,
            "warnings": list(self.warnings),
        }
