# src/data/analysis.py
"""历史数据完整性分析"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any, Optional, Sequence

from .models import HistoricalMetadata, PriceBar
from src.indicators.errors import EmptySeriesError
from src.messages import ErrorMessage


# 约一年的交易日数量
TRADING_DAYS_PER_YEAR = 252


def _as_date(value: Any) -> date:
    """日期字段统一转换为 date，支持 ISO 字符串与 date/datetime 对象"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))


def _one_year_before(today: date) -> date:
    try:
        return today.replace(year=today.year - 1)
    except ValueError:
        # 2 月 29 日
        return today - timedelta(days=366)


def analyze_historical_data(
    symbol: str,
    bars: Sequence[PriceBar],
    today: Optional[date] = None,
) -> HistoricalMetadata:
    """分析日线序列的覆盖范围，生成元信息与告警

    Args:
        symbol: 股票代码
        bars: K 线序列
        today: 当前日期，默认取系统日期

    Returns:
        HistoricalMetadata

    Raises:
        EmptySeriesError: 输入为空
    """
    if not bars:
        raise EmptySeriesError()

    today = today or date.today()
    dates = sorted(_as_date(bar.date) for bar in bars)
    oldest, newest = dates[0], dates[-1]

    has_full_year_data = len(bars) >= TRADING_DAYS_PER_YEAR
    has_recent_data = newest >= _one_year_before(today)

    warnings = []
    if not has_full_year_data:
        warnings.append(ErrorMessage.WARN_NOT_FULL_YEAR)
    if not has_recent_data:
        warnings.append(ErrorMessage.WARN_NOT_RECENT)

    return HistoricalMetadata(
        symbol=symbol,
        data_points=len(bars),
        oldest_date=oldest.isoformat(),
        newest_date=newest.isoformat(),
        warnings=warnings,
    )
