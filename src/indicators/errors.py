# src/indicators/errors.py
"""指标计算异常"""

from __future__ import annotations

from typing import Any, Optional

from src.messages import ErrorMessage


class EmptySeriesError(ValueError):
    """输入价格序列为空"""

    def __init__(self, message: str = ErrorMessage.HA_EMPTY_SERIES) -> None:
        super().__init__(message)


class MalformedBarError(ValueError):
    """K 线字段缺失或不是有限数值

    Attributes:
        index: 出错 K 线在输入序列中的下标
        date: 出错 K 线的日期 (可能为 None)
        field: 出错字段名
    """

    def __init__(
        self,
        message: str,
        index: Optional[int] = None,
        date: Any = None,
        field: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.index = index
        self.date = date
        self.field = field
