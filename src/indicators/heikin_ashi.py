# src/indicators/heikin_ashi.py
"""Heikin-Ashi 平均 K 线

计算公式:
    HA_Close = (O + H + L + C) / 4
    HA_Open  = (prev_HA_Open + prev_HA_Close) / 2   [首根: 原始 Open]
    HA_High  = max(H, HA_Open, HA_Close)
    HA_Low   = min(L, HA_Open, HA_Close)

每根 HA K 线依赖上一根 HA K 线，只能按时间正序逐根计算。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date as date_type
from typing import Any, List, Optional, Sequence

from src.data.models import PriceBar
from src.messages import ErrorMessage
from .errors import EmptySeriesError, MalformedBarError


OHLC_FIELDS = ("open", "high", "low", "close")


@dataclass(frozen=True)
class HeikinAshiBar:
    """Heikin-Ashi K 线

    Attributes:
        time: 对应原始 K 线的日期
        open: HA 开盘价
        high: HA 最高价
        low: HA 最低价
        close: HA 收盘价
    """
    time: str
    open: float
    high: float
    low: float
    close: float

    @property
    def is_bullish(self) -> bool:
        return self.close > self.open

    def to_dict(self) -> dict:
        """转换为蜡烛图组件使用的字典格式"""
        return {
            "time": self.time,
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "close": self.close,
        }


class HeikinAshi:
    """Heikin-Ashi 流式计算

    内部只保留上一根 HA K 线，逐根喂入时间正序的原始 OHLC。

    Example:
        >>> ha = HeikinAshi()
        >>> for bar in bars:
        ...     candle = ha.update(bar.open, bar.high, bar.low, bar.close, time=bar.date)
    """

    def __init__(self) -> None:
        self._result: Optional[HeikinAshiBar] = None

    def update(
        self,
        open: float,
        high: float,
        low: float,
        close: float,
        time: str = "",
    ) -> HeikinAshiBar:
        """计算下一根 HA K 线

        Args:
            open: 原始开盘价
            high: 原始最高价
            low: 原始最低价
            close: 原始收盘价
            time: K 线日期

        Returns:
            新的 HA K 线
        """
        ha_close = (open + high + low + close) / 4

        if self._result is None:
            # 首根没有前一根 HA，直接使用原始开盘价
            ha_open = open
        else:
            ha_open = (self._result.open + self._result.close) / 2

        self._result = HeikinAshiBar(
            time=time,
            open=ha_open,
            high=max(high, ha_open, ha_close),
            low=min(low, ha_open, ha_close),
            close=ha_close,
        )
        return self._result

    @property
    def value(self) -> Optional[HeikinAshiBar]:
        """获取最近一根 HA K 线"""
        return self._result

    @property
    def ready(self) -> bool:
        return self._result is not None

    def reset(self) -> None:
        """重置状态"""
        self._result = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self._result})"


def _date_key(value: Any) -> str:
    if isinstance(value, date_type):
        return value.isoformat()
    return str(value)


def _is_finite_number(value: Any) -> bool:
    # bool 是 int 的子类，需要单独排除
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # 超出 float 范围的 int
        return False


def _validate_bar(index: int, bar: Any) -> None:
    """校验单根 K 线，失败时抛出 MalformedBarError"""
    bar_date = getattr(bar, "date", None)
    if bar_date is None or bar_date == "":
        raise MalformedBarError(
            ErrorMessage.HA_MISSING_FIELD.format(index=index, date=None, field="date"),
            index=index, date=None, field="date",
        )

    for name in OHLC_FIELDS:
        if not hasattr(bar, name):
            raise MalformedBarError(
                ErrorMessage.HA_MISSING_FIELD.format(index=index, date=bar_date, field=name),
                index=index, date=bar_date, field=name,
            )
        value = getattr(bar, name)
        if not _is_finite_number(value):
            raise MalformedBarError(
                ErrorMessage.HA_NON_NUMERIC.format(index=index, date=bar_date, field=name, value=value),
                index=index, date=bar_date, field=name,
            )


def calculate_heikin_ashi(bars: Sequence[PriceBar]) -> List[HeikinAshiBar]:
    """将原始 K 线序列转换为 Heikin-Ashi 序列

    输入可以是时间正序或倒序，输出总是按日期正序，与输入一一对应。
    任何一根 K 线不合法都会使整个计算失败，不返回部分结果。

    Args:
        bars: PriceBar 序列，日期唯一

    Returns:
        HeikinAshiBar 列表（按时间正序）

    Raises:
        EmptySeriesError: 输入为空
        MalformedBarError: 字段缺失、非数值、非有限值或日期重复
    """
    if not bars:
        raise EmptySeriesError()

    seen = set()
    for index, bar in enumerate(bars):
        _validate_bar(index, bar)
        key = _date_key(bar.date)
        if key in seen:
            raise MalformedBarError(
                ErrorMessage.HA_DUPLICATE_DATE.format(index=index, date=bar.date),
                index=index, date=bar.date, field="date",
            )
        seen.add(key)

    ordered = sorted(bars, key=lambda b: _date_key(b.date))

    ha = HeikinAshi()
    return [
        ha.update(bar.open, bar.high, bar.low, bar.close, time=bar.date)
        for bar in ordered
    ]
